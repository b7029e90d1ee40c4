"""pytest fixtures for testing."""

import asyncio

import pytest

from dnsblclient.models.domain import Domain
from dnsblclient.services.resolver import ResolutionError


class FakeResolver:
    """Resolver returning scripted answers keyed by query name text.

    Names missing from a mapping fail the lookup with ResolutionError, the
    way NXDOMAIN does for TlsResolver. Every queried name is recorded.
    """

    def __init__(self, addresses=None, texts=None, delay=0.0):
        self.addresses = addresses or {}
        self.texts = texts or {}
        self.delay = delay
        self.address_queries: list[str] = []
        self.text_queries: list[str] = []

    async def lookup_address_records(self, name):
        self.address_queries.append(str(name))
        await asyncio.sleep(self.delay)
        return self._answer(self.addresses, name, "A")

    async def lookup_text_records(self, name):
        self.text_queries.append(str(name))
        await asyncio.sleep(self.delay)
        return self._answer(self.texts, name, "TXT")

    @staticmethod
    def _answer(mapping, name, rdtype):
        answer = mapping.get(str(name))
        if answer is None:
            raise ResolutionError(f"{rdtype} lookup for {name} failed: NXDOMAIN")
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_resolver():
    """Empty fake resolver; tests fill in addresses/texts."""
    return FakeResolver()


@pytest.fixture
def ip_zone():
    """IP blocklist zone."""
    return Domain.from_text("bl.test")


@pytest.fixture
def domain_zone():
    """Domain blocklist zone."""
    return Domain.from_text("dbl.test")


@pytest.fixture
def make_resolver():
    """Factory for fake resolvers with scripted answers."""
    return FakeResolver
