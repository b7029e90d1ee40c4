"""Configuration module for the DNSBL client.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dnsblclient.models.domain import BlockList, Domain
from dnsblclient.utils.ip_utils import is_valid_ip


REPORT_FORMATS = ("json", "yaml")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # DNSBL Configuration
    dnsbl_zones: List[BlockList] = field(default_factory=list)
    dnsbl_domain_zones: List[BlockList] = field(default_factory=list)

    # Resolver Configuration
    dns_resolvers: List[str] = field(default_factory=lambda: ["1.1.1.1", "1.0.0.1"])
    dns_tls_hostname: str = "cloudflare-dns.com"
    dns_tls_port: int = 853
    dns_timeout: int = 5
    dns_concurrency: int = 10

    # Operational Configuration
    report_format: str = "json"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If variables are missing or invalid. Invalid zone
                names raise InvalidNameError, a ValueError subclass.

        Returns:
            Config: Validated configuration instance.
        """
        # DNSBL Configuration
        dnsbl_zones = cls._parse_zones(os.getenv("DNSBL_ZONES", ""))
        dnsbl_domain_zones = cls._parse_zones(os.getenv("DNSBL_DOMAIN_ZONES", ""))
        if not dnsbl_zones and not dnsbl_domain_zones:
            raise ValueError(
                "DNSBL_ZONES or DNSBL_DOMAIN_ZONES must contain at least one zone"
            )

        # Resolver Configuration
        dns_resolvers = cls._split_list(os.getenv("DNS_RESOLVERS", "1.1.1.1,1.0.0.1"))
        if not dns_resolvers:
            raise ValueError("DNS_RESOLVERS must contain at least one address")
        for address in dns_resolvers:
            if not is_valid_ip(address):
                raise ValueError(f"DNS_RESOLVERS contains an invalid address: {address}")

        dns_tls_hostname = os.getenv("DNS_TLS_HOSTNAME", "cloudflare-dns.com").strip()
        if not dns_tls_hostname:
            raise ValueError("DNS_TLS_HOSTNAME cannot be empty")

        dns_tls_port = int(os.getenv("DNS_TLS_PORT", "853"))
        if not 1 <= dns_tls_port <= 65535:
            raise ValueError("DNS_TLS_PORT must be between 1 and 65535")

        dns_timeout = int(os.getenv("DNS_TIMEOUT", "5"))
        if not 1 <= dns_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be between 1 and 60 seconds")

        dns_concurrency = int(os.getenv("DNS_CONCURRENCY", "10"))
        if not 1 <= dns_concurrency <= 100:
            raise ValueError("DNS_CONCURRENCY must be between 1 and 100")

        # Operational Configuration
        report_format = os.getenv("REPORT_FORMAT", "json").strip().lower()
        if report_format not in REPORT_FORMATS:
            raise ValueError(
                f"REPORT_FORMAT must be one of: {', '.join(REPORT_FORMATS)}"
            )

        verbose_str = os.getenv("VERBOSE", "false").lower()
        verbose = verbose_str in ("true", "1", "yes")

        return cls(
            dnsbl_zones=dnsbl_zones,
            dnsbl_domain_zones=dnsbl_domain_zones,
            dns_resolvers=dns_resolvers,
            dns_tls_hostname=dns_tls_hostname,
            dns_tls_port=dns_tls_port,
            dns_timeout=dns_timeout,
            dns_concurrency=dns_concurrency,
            report_format=report_format,
            verbose=verbose,
        )

    @staticmethod
    def _split_list(value: str) -> List[str]:
        """Split a comma-separated value, dropping blanks."""
        return [item.strip() for item in value.split(",") if item.strip()]

    @classmethod
    def _parse_zones(cls, value: str) -> List[BlockList]:
        """Parse a comma-separated zone list into Domain objects.

        Raises:
            InvalidNameError: If any zone is not a valid DNS name.
        """
        return [Domain.from_text(zone) for zone in cls._split_list(value)]
