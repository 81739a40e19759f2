"""Codec pairs: ``*_to_bytes`` decodes text, ``bytes_to_*`` encodes bytes."""

from byte_encodings.codec.bitstring import bit_string_to_bytes, bytes_to_bit_string
from byte_encodings.codec.latin1 import (
    binary_to_bytes,
    bytes_to_binary,
    bytes_to_latin1,
    latin1_to_bytes,
)
from byte_encodings.codec.hexadecimal import (
    base16_to_bytes,
    bytes_to_base16,
    bytes_to_hex,
    hex_to_bytes,
)
from byte_encodings.codec.b64 import (
    ascii_to_bytes,
    ascii_url_to_bytes,
    base64_to_bytes,
    base64url_to_bytes,
    bytes_to_ascii,
    bytes_to_ascii_url,
    bytes_to_base64,
    bytes_to_base64url,
)
from byte_encodings.codec.windows1252 import bytes_to_windows1252, windows1252_to_bytes
from byte_encodings.codec.utf16 import bytes_to_utf16, utf16_to_bytes
from byte_encodings.codec.utf8 import bytes_to_utf8, utf8_to_bytes

__all__ = [
    "bit_string_to_bytes",
    "bytes_to_bit_string",
    "binary_to_bytes",
    "bytes_to_binary",
    "latin1_to_bytes",
    "bytes_to_latin1",
    "hex_to_bytes",
    "bytes_to_hex",
    "base16_to_bytes",
    "bytes_to_base16",
    "base64_to_bytes",
    "bytes_to_base64",
    "ascii_to_bytes",
    "bytes_to_ascii",
    "base64url_to_bytes",
    "bytes_to_base64url",
    "ascii_url_to_bytes",
    "bytes_to_ascii_url",
    "windows1252_to_bytes",
    "bytes_to_windows1252",
    "utf16_to_bytes",
    "bytes_to_utf16",
    "utf8_to_bytes",
    "bytes_to_utf8",
]
