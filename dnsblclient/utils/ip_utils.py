"""IP address utilities for DNSBL queries."""

import ipaddress

import dns.name
import dns.reversename


IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def is_valid_ip(ip: str) -> bool:
    """Validate if string is a valid IPv4 or IPv6 address.

    Args:
        ip: IP address string to validate.

    Returns:
        bool: True if valid, False otherwise.

    Examples:
        >>> is_valid_ip("203.0.113.45")
        True
        >>> is_valid_ip("2001:db8::1")
        True
        >>> is_valid_ip("256.0.0.1")
        False
    """
    try:
        ipaddress.ip_address(ip)
        return True
    except ValueError:
        return False


def parse_ip(ip: str | IPAddress) -> IPAddress:
    """Turn text or an address object into a validated address object.

    Args:
        ip: Address text or an ipaddress.IPv4Address / IPv6Address.

    Returns:
        IPv4Address | IPv6Address: Parsed address.

    Raises:
        ValueError: If ip is not a valid IP address.
    """
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    try:
        return ipaddress.ip_address(ip)
    except ValueError as e:
        raise ValueError(f"Invalid IP address: {ip}") from e


def reverse_address_labels(address: IPAddress) -> tuple[bytes, ...]:
    """Reverse-lookup labels of an address without the arpa suffix.

    IPv4 yields the four octets reversed; IPv6 yields the 32 nibbles
    reversed. For example 203.0.113.45 becomes 45.113.0.203.

    Args:
        address: Validated IP address.

    Returns:
        tuple[bytes, ...]: Labels in presentation order.

    Raises:
        RuntimeError: If the reverse name has no labels besides the arpa
            suffix, which dnspython never produces for a valid address.

    Examples:
        >>> reverse_address_labels(ipaddress.ip_address("192.168.1.1"))
        (b'1', b'1', b'168', b'192')
    """
    reverse_name = dns.reversename.from_address(str(address))
    labels = reverse_name.relativize(dns.name.root).labels

    # Drop "in-addr.arpa" / "ip6.arpa"
    if len(labels) <= 2:
        raise RuntimeError(f"Reverse name {reverse_name} has no address labels")
    return labels[:-2]
