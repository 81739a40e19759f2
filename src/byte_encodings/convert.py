"""
Encoding dispatch and generic conversion.

``string_to_bytes`` and ``bytes_to_string`` route an encoding label to its
codec pair. ``convert_encoding`` relabels a value from one encoding to
another, keeping the value's type: text stays text, bytes stay bytes.
"""

from __future__ import annotations

import logging
from typing import Callable, overload

from byte_encodings.codec import (
    base64_to_bytes,
    base64url_to_bytes,
    binary_to_bytes,
    bit_string_to_bytes,
    bytes_to_base64,
    bytes_to_base64url,
    bytes_to_binary,
    bytes_to_bit_string,
    bytes_to_hex,
    bytes_to_utf16,
    bytes_to_utf8,
    bytes_to_windows1252,
    hex_to_bytes,
    utf16_to_bytes,
    utf8_to_bytes,
    windows1252_to_bytes,
)
from byte_encodings.core.buffer import ByteBuffer
from byte_encodings.core.encoding import Encoding, resolve_encoding
from byte_encodings.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


DECODERS: dict[Encoding, Callable[[str], bytes]] = {
    Encoding.BASE2: bit_string_to_bytes,
    Encoding.BINARY: binary_to_bytes,
    Encoding.BASE16: hex_to_bytes,
    Encoding.BASE64: base64_to_bytes,
    Encoding.BASE64_URL: base64url_to_bytes,
    Encoding.WINDOWS_1252: windows1252_to_bytes,
    Encoding.UTF16: utf16_to_bytes,
    Encoding.UTF8: utf8_to_bytes,
}

ENCODERS: dict[Encoding, Callable[[ByteBuffer], str]] = {
    Encoding.BASE2: bytes_to_bit_string,
    Encoding.BINARY: bytes_to_binary,
    Encoding.BASE16: bytes_to_hex,
    Encoding.BASE64: bytes_to_base64,
    Encoding.BASE64_URL: bytes_to_base64url,
    Encoding.WINDOWS_1252: bytes_to_windows1252,
    Encoding.UTF16: bytes_to_utf16,
    Encoding.UTF8: bytes_to_utf8,
}


def _decode(text: str, encoding: Encoding) -> bytes:
    try:
        data = DECODERS[encoding](text)
    except InvalidInputError as exc:
        logger.debug("decode as %s failed: %s", encoding, exc)
        raise
    logger.debug("decoded %d chars as %s into %d bytes", len(text), encoding, len(data))
    return data


def _encode(buffer, encoding: Encoding) -> str:
    try:
        text = ENCODERS[encoding](buffer)
    except InvalidInputError as exc:
        logger.debug("encode as %s failed: %s", encoding, exc)
        raise
    logger.debug("encoded buffer as %s into %d chars", encoding, len(text))
    return text


def string_to_bytes(text: str, encoding: Encoding | str) -> bytes:
    """
    Decode ``text`` written in ``encoding`` into bytes.

    Raises:
        UnsupportedEncodingError: Unknown encoding label
        InvalidInputError: ``text`` is not valid for the encoding
    """
    return _decode(text, resolve_encoding(encoding))


def bytes_to_string(buffer, encoding: Encoding | str) -> str:
    """
    Encode ``buffer`` (any integer buffer) as ``encoding`` text.

    Raises:
        UnsupportedEncodingError: Unknown encoding label
        InvalidInputError: ``buffer`` cannot be represented in the encoding
    """
    return _encode(buffer, resolve_encoding(encoding))


@overload
def convert_encoding(value: str, source_encoding: Encoding | str, dest_encoding: Encoding | str) -> str: ...
@overload
def convert_encoding(value: ByteBuffer, source_encoding: Encoding | str, dest_encoding: Encoding | str) -> bytes: ...


def convert_encoding(value, source_encoding, dest_encoding):
    """
    Relabel ``value`` from ``source_encoding`` to ``dest_encoding``.

    Text is decoded from the source encoding and the bytes re-encoded as
    destination text. Bytes go the other way round: they are first encoded
    as source text, and that text is then decoded as if it were written in
    the destination encoding. So ``convert_encoding(b"ff", "utf8", "hex")``
    returns ``b"\\xff"``, not the hex digits of ``b"ff"``.

    Both labels are checked before any conversion work is done.
    """
    source = resolve_encoding(source_encoding)
    dest = resolve_encoding(dest_encoding)
    logger.debug("converting %s from %s to %s", type(value).__name__, source, dest)

    if isinstance(value, str):
        return _encode(_decode(value, source), dest)
    return _decode(_encode(value, source), dest)
