"""Shared fixtures for codec tests."""

import pytest

from byte_encodings.core.encoding import ENCODING_ALIASES

# Valid in every encoding: even length, well-formed UTF-8, no undefined
# windows-1252 bytes and no surrogates when read as UTF-16.
PORTABLE_BYTES = "Hi€!".encode("utf-8")


@pytest.fixture
def all_bytes() -> bytes:
    """Every byte value once, in order."""
    return bytes(range(256))


@pytest.fixture
def portable_bytes() -> bytes:
    return PORTABLE_BYTES


@pytest.fixture(params=sorted(ENCODING_ALIASES))
def encoding_label(request: pytest.FixtureRequest) -> str:
    """Each of the accepted encoding labels."""
    return request.param
