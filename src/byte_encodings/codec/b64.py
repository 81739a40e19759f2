"""Base64 and URL-safe Base64 (RFC 4648) strings."""

import base64
import binascii
import re

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.constants import BASE64_ALPHABET
from byte_encodings.core.errors import InvalidInputError

ENCODING = "base64"
URL_ENCODING = "base64Url"

_WHITESPACE = re.compile(r'\s')
_ASCII_WHITESPACE = re.compile(r'[\t\n\f\r ]')

_URL_TO_STANDARD = str.maketrans('-_', '+/')
_STANDARD_TO_URL = str.maketrans('+/', '-_')


def _decode(text: str, encoding: str) -> bytes:
    data = _ASCII_WHITESPACE.sub('', text)
    if len(data) % 4 == 0:
        if data.endswith('=='):
            data = data[:-2]
        elif data.endswith('='):
            data = data[:-1]
    if len(data) % 4 == 1:
        raise InvalidInputError("Base64 data has an invalid length", encoding)
    for i, char in enumerate(data):
        if char not in BASE64_ALPHABET:
            raise InvalidInputError(
                f"Invalid base64 character: {char!r}", encoding, i
            )

    padded = data + '=' * (-len(data) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise InvalidInputError(f"Malformed base64: {exc}", encoding) from exc


def base64_to_bytes(text: str) -> bytes:
    """
    Decode standard Base64.

    ASCII whitespace is ignored and trailing ``=`` padding is optional,
    matching the forgiving decoder browsers use for ``atob``.
    """
    return _decode(text, ENCODING)


def base64url_to_bytes(text: str) -> bytes:
    """Decode URL-safe Base64, padded or not."""
    standard = _WHITESPACE.sub('', text.translate(_URL_TO_STANDARD))
    return _decode(standard, URL_ENCODING)


def bytes_to_base64(buffer) -> str:
    """Standard Base64 with ``=`` padding."""
    return base64.b64encode(normalize_to_bytes(buffer)).decode('ascii')


def bytes_to_base64url(buffer) -> str:
    """URL-safe Base64 without padding."""
    return bytes_to_base64(buffer).rstrip('=').translate(_STANDARD_TO_URL)


ascii_to_bytes = base64_to_bytes
ascii_url_to_bytes = base64url_to_bytes
bytes_to_ascii = bytes_to_base64
bytes_to_ascii_url = bytes_to_base64url
