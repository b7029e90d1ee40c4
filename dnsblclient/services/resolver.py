"""Async DNS resolver used by the DNSBL engine.

The engine only needs two lookups, described by the Resolver protocol.
TlsResolver implements them with dnspython's asyncio resolver talking
DNS-over-TLS to a public recursive resolver (Cloudflare by default).
"""

import logging
from typing import List, Protocol, Sequence

import dns.asyncresolver
import dns.exception
import dns.nameserver
import dns.rdatatype

from dnsblclient.models.domain import Domain
from dnsblclient.utils.ip_utils import parse_ip


logger = logging.getLogger(__name__)

CLOUDFLARE_TLS_ADDRESSES = ("1.1.1.1", "1.0.0.1")
CLOUDFLARE_TLS_HOSTNAME = "cloudflare-dns.com"
DNS_OVER_TLS_PORT = 853


class ResolverInitError(Exception):
    """Raised when the resolver cannot be configured."""


class ResolutionError(Exception):
    """Raised by TlsResolver when a lookup fails for any reason."""


class Resolver(Protocol):
    """Lookups the DNSBL engine depends on.

    Implementations raise an exception when a lookup fails (NXDOMAIN, no
    answer, timeout, server or network error); the engine does not look at
    the exception type.
    """

    async def lookup_address_records(self, name: Domain) -> List[str]:
        """Return the IPv4 addresses (A records) of name."""
        ...

    async def lookup_text_records(self, name: Domain) -> List[List[bytes]]:
        """Return the TXT records of name, each as its list of byte chunks."""
        ...


class TlsResolver:
    """DNS-over-TLS resolver backed by dns.asyncresolver.Resolver.

    The underlying resolver holds no per-query state, so one instance is
    shared by every concurrent check.
    """

    def __init__(self, resolver: dns.asyncresolver.Resolver):
        self._resolver = resolver

    @classmethod
    async def create(
        cls,
        addresses: Sequence[str] = CLOUDFLARE_TLS_ADDRESSES,
        hostname: str = CLOUDFLARE_TLS_HOSTNAME,
        port: int = DNS_OVER_TLS_PORT,
        timeout: float = 5.0,
    ) -> "TlsResolver":
        """Configure a resolver that queries the given DoT endpoints.

        Args:
            addresses: Resolver IP addresses.
            hostname: TLS server name used to verify the certificate.
            port: DNS-over-TLS port.
            timeout: Total time allowed per lookup in seconds.

        Returns:
            TlsResolver: Ready-to-use resolver.

        Raises:
            ResolverInitError: If no address is given or the resolver
                cannot be configured.
        """
        if not addresses:
            raise ResolverInitError("At least one resolver address is required")

        try:
            nameservers = [
                dns.nameserver.DoTNameserver(
                    str(parse_ip(address)), port, hostname=hostname
                )
                for address in addresses
            ]
            resolver = dns.asyncresolver.Resolver(configure=False)
            resolver.nameservers = nameservers
            resolver.lifetime = timeout
        except (ValueError, dns.exception.DNSException) as e:
            raise ResolverInitError(f"Failed to configure resolver: {e}") from e

        logger.debug(
            f"Configured DNS-over-TLS resolver {hostname} via {', '.join(addresses)}"
        )
        return cls(resolver)

    async def lookup_address_records(self, name: Domain) -> List[str]:
        """Resolve A records.

        Raises:
            ResolutionError: On NXDOMAIN, empty answer, timeout or any
                other resolution failure.
        """
        answer = await self._resolve(name, dns.rdatatype.A)
        return [rdata.address for rdata in answer]

    async def lookup_text_records(self, name: Domain) -> List[List[bytes]]:
        """Resolve TXT records.

        Raises:
            ResolutionError: On NXDOMAIN, empty answer, timeout or any
                other resolution failure.
        """
        answer = await self._resolve(name, dns.rdatatype.TXT)
        return [list(rdata.strings) for rdata in answer]

    async def _resolve(self, name: Domain, rdtype: dns.rdatatype.RdataType):
        try:
            return await self._resolver.resolve(name.name, rdtype)
        except (dns.exception.DNSException, OSError) as e:
            raise ResolutionError(
                f"{dns.rdatatype.to_text(rdtype)} lookup for {name} failed: "
                f"{type(e).__name__}"
            ) from e
