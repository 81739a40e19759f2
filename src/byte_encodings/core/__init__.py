"""Encoding tables, identifiers, errors and buffer handling."""

from byte_encodings.core.buffer import ByteBuffer, normalize_to_bytes
from byte_encodings.core.encoding import (
    ENCODING_ALIASES,
    Encoding,
    encoding_labels,
    resolve_encoding,
)
from byte_encodings.core.errors import (
    EncodingError,
    InvalidInputError,
    UnsupportedEncodingError,
)

__all__ = [
    "ByteBuffer",
    "normalize_to_bytes",
    "ENCODING_ALIASES",
    "Encoding",
    "encoding_labels",
    "resolve_encoding",
    "EncodingError",
    "InvalidInputError",
    "UnsupportedEncodingError",
]
