"""Test fixtures for request-builder unit tests."""

import random
from dataclasses import dataclass, field
from urllib.parse import unquote_to_bytes

import pytest

from request_builder.builder import RequestBuilder
from request_builder.models.request import Draft


# -----------------------------------------------------------------------------
# Random sources
# -----------------------------------------------------------------------------


@dataclass
class CountingRandomSource:
    """Deterministic random source returning 0x00, 0x01, ... across calls."""

    calls: list[int] = field(default_factory=list)
    _next: int = 0

    def __call__(self, n: int) -> bytes:
        self.calls.append(n)
        data = bytes((self._next + i) % 256 for i in range(n))
        self._next += n
        return data


@pytest.fixture
def random_source() -> CountingRandomSource:
    """Create a deterministic random source."""
    return CountingRandomSource()


@pytest.fixture
def seeded_random():
    """Seeded stdlib random source for boundary generation."""
    return random.Random(1234).randbytes


# -----------------------------------------------------------------------------
# Builder fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def builder() -> RequestBuilder:
    """Fresh builder with default draft."""
    return RequestBuilder()


@pytest.fixture
def make_draft():
    """Factory fixture to create drafts."""

    def _make(**kwargs) -> Draft:
        return Draft(**kwargs)

    return _make


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def decode_query(encoded: bytes) -> list[tuple[bytes, bytes]]:
    """Split a query string back into percent-decoded (name, value) pairs."""
    if not encoded:
        return []
    pairs = []
    for chunk in encoded.split(b"&"):
        name, _, value = chunk.partition(b"=")
        pairs.append((unquote_to_bytes(name), unquote_to_bytes(value)))
    return pairs
