"""DNSBL query name construction.

Domain candidates and address candidates are turned into query names by two
separate rules:

- domain: candidate labels followed by zone labels, as given
  (bad.example.com + dbl.example.org -> bad.example.com.dbl.example.org)
- address: reversed octets/nibbles followed by zone labels
  (192.168.0.1 + zen.example.org -> 1.0.168.192.zen.example.org)
"""

import dns.name

from dnsblclient.models.domain import BlockList, Domain, NameTooLongError
from dnsblclient.utils.ip_utils import IPAddress, parse_ip, reverse_address_labels


def build_domain_query(zone: BlockList, domain: Domain) -> Domain:
    """Build the query name for a domain candidate.

    Args:
        zone: Blocklist zone (e.g. "dbl.example.org").
        domain: Candidate domain (e.g. "bad.example.com").

    Returns:
        Domain: Query name (e.g. "bad.example.com.dbl.example.org").

    Raises:
        NameTooLongError: If the query name exceeds 255 octets.
    """
    return _prepend_labels(domain.relative_labels, zone)


def build_ip_query(zone: BlockList, ip: str | IPAddress) -> Domain:
    """Build the query name for an address candidate.

    Args:
        zone: Blocklist zone (e.g. "zen.example.org").
        ip: IPv4 or IPv6 address, as text or an ipaddress object.

    Returns:
        Domain: Query name (e.g. "1.0.168.192.zen.example.org").

    Raises:
        ValueError: If ip is not a valid IP address.
        NameTooLongError: If the query name exceeds 255 octets.
    """
    address = parse_ip(ip)
    return _prepend_labels(reverse_address_labels(address), zone)


def _prepend_labels(labels: tuple[bytes, ...], zone: BlockList) -> Domain:
    try:
        name = dns.name.Name(labels + zone.name.labels)
    except dns.name.NameTooLong as e:
        prefix = b".".join(labels).decode("ascii")
        raise NameTooLongError(
            f"Query name for {prefix} in zone {zone} exceeds 255 octets"
        ) from e
    return Domain(name=name, fully_qualified=zone.fully_qualified)
