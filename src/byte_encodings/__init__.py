"""
byte-encodings: convert between byte buffers and their text forms

Quick Start:
    >>> import byte_encodings as enc
    >>> enc.string_to_bytes("48656c6c6f", "hex")
    b'Hello'
    >>> enc.bytes_to_string(b"Hello", "base64")
    'SGVsbG8='
    >>> enc.convert_encoding("48656c6c6f", "hex", "ascii")
    'SGVsbG8='

Encodings (with accepted aliases):
    - base2 / binaryString: strings of 0 and 1, eight per byte
    - binary / latin1: one character per byte
    - base16 / hex: two hex digits per byte
    - base64 / ascii: standard Base64
    - base64Url / asciiUrl: URL-safe Base64 without padding
    - windows1252 / windows-1252
    - utf16 / utf-16: native byte order
    - utf8 / utf-8
"""

import logging

__version__ = "0.1.0"

# Identifiers and errors
from byte_encodings.core.encoding import ENCODING_ALIASES, Encoding, resolve_encoding
from byte_encodings.core.errors import (
    EncodingError,
    InvalidInputError,
    UnsupportedEncodingError,
)
from byte_encodings.core.buffer import normalize_to_bytes

# Codec pairs
from byte_encodings.codec import (
    ascii_to_bytes,
    ascii_url_to_bytes,
    base16_to_bytes,
    base64_to_bytes,
    base64url_to_bytes,
    binary_to_bytes,
    bit_string_to_bytes,
    bytes_to_ascii,
    bytes_to_ascii_url,
    bytes_to_base16,
    bytes_to_base64,
    bytes_to_base64url,
    bytes_to_binary,
    bytes_to_bit_string,
    bytes_to_hex,
    bytes_to_latin1,
    bytes_to_utf16,
    bytes_to_utf8,
    bytes_to_windows1252,
    hex_to_bytes,
    latin1_to_bytes,
    utf16_to_bytes,
    utf8_to_bytes,
    windows1252_to_bytes,
)

# Dispatch
from byte_encodings.convert import bytes_to_string, convert_encoding, string_to_bytes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Identifiers
    "Encoding",
    "ENCODING_ALIASES",
    "resolve_encoding",
    # Errors
    "EncodingError",
    "InvalidInputError",
    "UnsupportedEncodingError",
    # Buffers
    "normalize_to_bytes",
    # Dispatch
    "string_to_bytes",
    "bytes_to_string",
    "convert_encoding",
    # Codec pairs
    "bit_string_to_bytes", "bytes_to_bit_string",
    "binary_to_bytes", "bytes_to_binary",
    "latin1_to_bytes", "bytes_to_latin1",
    "hex_to_bytes", "bytes_to_hex",
    "base16_to_bytes", "bytes_to_base16",
    "base64_to_bytes", "bytes_to_base64",
    "ascii_to_bytes", "bytes_to_ascii",
    "base64url_to_bytes", "bytes_to_base64url",
    "ascii_url_to_bytes", "bytes_to_ascii_url",
    "windows1252_to_bytes", "bytes_to_windows1252",
    "utf16_to_bytes", "bytes_to_utf16",
    "utf8_to_bytes", "bytes_to_utf8",
]
