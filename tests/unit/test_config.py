"""Unit tests for configuration validation."""

import os

import pytest

from dnsblclient.config import Config
from dnsblclient.models.domain import Domain, InvalidNameError


CONFIG_VARS = (
    "DNSBL_ZONES",
    "DNSBL_DOMAIN_ZONES",
    "DNS_RESOLVERS",
    "DNS_TLS_HOSTNAME",
    "DNS_TLS_PORT",
    "DNS_TIMEOUT",
    "DNS_CONCURRENCY",
    "REPORT_FORMAT",
    "VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without configuration variables."""
    for key in CONFIG_VARS:
        monkeypatch.delenv(key, raising=False)


def test_config_from_env_valid(monkeypatch):
    """Test loading valid configuration from environment variables."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org, bl.example.net")
    monkeypatch.setenv("DNSBL_DOMAIN_ZONES", "dbl.example.org")

    config = Config.from_env()

    assert config.dnsbl_zones == [
        Domain.from_text("zen.example.org"),
        Domain.from_text("bl.example.net"),
    ]
    assert config.dnsbl_domain_zones == [Domain.from_text("dbl.example.org")]
    assert config.dns_resolvers == ["1.1.1.1", "1.0.0.1"]  # Default
    assert config.dns_tls_hostname == "cloudflare-dns.com"  # Default
    assert config.dns_tls_port == 853  # Default
    assert config.dns_timeout == 5  # Default
    assert config.dns_concurrency == 10  # Default
    assert config.report_format == "json"  # Default
    assert config.verbose is False  # Default


def test_config_domain_zones_only(monkeypatch):
    """Test IP zones are optional when domain zones are given."""
    monkeypatch.setenv("DNSBL_DOMAIN_ZONES", "dbl.example.org")

    config = Config.from_env()

    assert config.dnsbl_zones == []


def test_config_missing_zones():
    """Test that at least one zone is required."""
    with pytest.raises(ValueError, match="must contain at least one zone"):
        Config.from_env()


def test_config_blank_zones(monkeypatch):
    """Test that a list of blanks counts as empty."""
    monkeypatch.setenv("DNSBL_ZONES", " , ,")

    with pytest.raises(ValueError, match="must contain at least one zone"):
        Config.from_env()


def test_config_invalid_zone(monkeypatch):
    """Test that invalid zone names are rejected at load time."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org,bad..zone")

    with pytest.raises(InvalidNameError):
        Config.from_env()


def test_config_custom_resolver(monkeypatch):
    """Test resolver settings are read from the environment."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org")
    monkeypatch.setenv("DNS_RESOLVERS", "9.9.9.9,2620:fe::fe")
    monkeypatch.setenv("DNS_TLS_HOSTNAME", "dns.quad9.net")
    monkeypatch.setenv("DNS_TLS_PORT", "8853")

    config = Config.from_env()

    assert config.dns_resolvers == ["9.9.9.9", "2620:fe::fe"]
    assert config.dns_tls_hostname == "dns.quad9.net"
    assert config.dns_tls_port == 8853


def test_config_invalid_resolver_address(monkeypatch):
    """Test that resolver addresses must be IP addresses."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org")
    monkeypatch.setenv("DNS_RESOLVERS", "one.one.one.one")

    with pytest.raises(ValueError, match="DNS_RESOLVERS contains an invalid address"):
        Config.from_env()


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("DNS_TIMEOUT", "0", "DNS_TIMEOUT must be between 1 and 60 seconds"),
        ("DNS_TIMEOUT", "61", "DNS_TIMEOUT must be between 1 and 60 seconds"),
        ("DNS_CONCURRENCY", "0", "DNS_CONCURRENCY must be between 1 and 100"),
        ("DNS_CONCURRENCY", "101", "DNS_CONCURRENCY must be between 1 and 100"),
        ("DNS_TLS_PORT", "0", "DNS_TLS_PORT must be between 1 and 65535"),
        ("REPORT_FORMAT", "xml", "REPORT_FORMAT must be one of: json, yaml"),
    ],
)
def test_config_range_validation(monkeypatch, key, value, message):
    """Test numeric ranges and choices are validated."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org")
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError, match=message):
        Config.from_env()


def test_config_report_format_case_insensitive(monkeypatch):
    """Test REPORT_FORMAT is normalised to lower case."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org")
    monkeypatch.setenv("REPORT_FORMAT", "YAML")

    assert Config.from_env().report_format == "yaml"


def test_config_verbose_parsing(monkeypatch):
    """Test that VERBOSE boolean parsing works correctly."""
    monkeypatch.setenv("DNSBL_ZONES", "zen.example.org")

    # Test true values
    for verbose_value in ["true", "True", "TRUE", "1", "yes"]:
        monkeypatch.setenv("VERBOSE", verbose_value)

        config = Config.from_env()
        assert config.verbose is True, f"Expected True for VERBOSE={verbose_value}"

    # Test false values
    for verbose_value in ["false", "False", "0", "no", ""]:
        monkeypatch.setenv("VERBOSE", verbose_value)

        config = Config.from_env()
        assert config.verbose is False, f"Expected False for VERBOSE={verbose_value}"

    # Test default
    monkeypatch.delenv("VERBOSE", raising=False)
    assert Config.from_env().verbose is False, "Expected False for VERBOSE not set"


def test_config_env_not_leaking():
    """Test the autouse fixture removed configuration variables."""
    assert not any(key in os.environ for key in CONFIG_VARS)
