"""DNSBL lookup engine.

A check is two sequential queries against the same name:

1. A query. Any failure (NXDOMAIN, timeout, server error...) or an empty
   answer means the candidate is NotBlocked.
2. TXT query for the listing reason. Failure still leaves the candidate
   Blocked, just without a message.
"""

import logging
from typing import Optional, Sequence

from dnsblclient.config import Config
from dnsblclient.models.block_status import Blocked, BlockStatus, NotBlocked
from dnsblclient.models.domain import BlockList, Domain
from dnsblclient.services.resolver import Resolver, TlsResolver
from dnsblclient.utils.ip_utils import IPAddress
from dnsblclient.utils.query_names import build_domain_query, build_ip_query


logger = logging.getLogger(__name__)


def decode_txt_chunk(chunk: bytes) -> str:
    """Decode one TXT character-string as UTF-8, or "" if it is not UTF-8."""
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def join_txt_records(records: Sequence[Sequence[bytes]]) -> Optional[str]:
    """Build the listing message from TXT records.

    Chunks of one record are joined with a space, then records are joined
    with a space.

    Args:
        records: TXT records, each a sequence of byte chunks.

    Returns:
        str | None: Joined message, or None if no chunk decoded to text.

    Examples:
        >>> join_txt_records([[b"Listed", b"by"], [b"example"]])
        'Listed by example'
        >>> join_txt_records([[b"\\xff"]]) is None
        True
    """
    decoded = [[decode_txt_chunk(chunk) for chunk in record] for record in records]
    if not any(chunk for record in decoded for chunk in record):
        return None
    return " ".join(" ".join(record) for record in decoded)


class DNSBL:
    """Checks candidates against DNS blocklists.

    Holds one resolver for its lifetime; check_domain and check_ip may be
    awaited concurrently from any number of tasks.

    Example:
        >>> dnsbl = await DNSBL.create()
        >>> zone = Domain.from_text("zen.example.org")
        >>> await dnsbl.check_ip(zone, "192.0.2.1")
        NotBlocked()
    """

    def __init__(self, resolver: Resolver):
        self._resolver = resolver

    @classmethod
    async def create(cls, config: Config | None = None) -> "DNSBL":
        """Create an engine backed by a DNS-over-TLS resolver.

        Args:
            config: Resolver settings; Cloudflare DoT defaults if None.

        Raises:
            ResolverInitError: If the resolver cannot be configured.
        """
        if config is None:
            resolver = await TlsResolver.create()
        else:
            resolver = await TlsResolver.create(
                addresses=config.dns_resolvers,
                hostname=config.dns_tls_hostname,
                port=config.dns_tls_port,
                timeout=config.dns_timeout,
            )
        return cls(resolver)

    async def check_domain(self, zone: BlockList, domain: Domain) -> BlockStatus:
        """Check a domain against a domain blocklist (e.g. a DBL/URIBL).

        Raises:
            NameTooLongError: If domain + zone is not a valid DNS name.
        """
        return await self._check(build_domain_query(zone, domain))

    async def check_ip(self, zone: BlockList, ip: str | IPAddress) -> BlockStatus:
        """Check an IPv4 or IPv6 address against an IP blocklist.

        Raises:
            ValueError: If ip is not a valid IP address.
            NameTooLongError: If the reversed address + zone is too long.
        """
        return await self._check(build_ip_query(zone, ip))

    async def _check(self, query: Domain) -> BlockStatus:
        try:
            addresses = await self._resolver.lookup_address_records(query)
        except Exception as e:
            logger.debug(f"A lookup for {query} failed, not listed: {e}")
            return NotBlocked()

        if not addresses:
            logger.debug(f"A lookup for {query} returned no records, not listed")
            return NotBlocked()

        try:
            records = await self._resolver.lookup_text_records(query)
        except Exception as e:
            logger.debug(f"TXT lookup for {query} failed: {e}")
            logger.info(f"{query} is listed ({', '.join(addresses)}), no reason given")
            return Blocked(message=None)

        message = join_txt_records(records)
        logger.info(f"{query} is listed ({', '.join(addresses)}): {message}")
        return Blocked(message=message)
