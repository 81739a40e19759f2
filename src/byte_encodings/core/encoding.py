"""Encoding identifiers and label resolution."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from byte_encodings.core.errors import UnsupportedEncodingError


class Encoding(str, Enum):
    """Canonical encodings, one per codec pair."""
    BASE2 = "base2"
    BINARY = "binary"
    BASE16 = "base16"
    BASE64 = "base64"
    BASE64_URL = "base64Url"
    WINDOWS_1252 = "windows1252"
    UTF16 = "utf16"
    UTF8 = "utf8"

    def __str__(self) -> str:
        return self.value


# Every accepted label -> canonical encoding. Labels are case-sensitive.
ENCODING_ALIASES: MappingProxyType[str, Encoding] = MappingProxyType({
    "base2": Encoding.BASE2,
    "binaryString": Encoding.BASE2,
    "binary": Encoding.BINARY,
    "latin1": Encoding.BINARY,
    "base16": Encoding.BASE16,
    "hex": Encoding.BASE16,
    "base64": Encoding.BASE64,
    "ascii": Encoding.BASE64,
    "base64Url": Encoding.BASE64_URL,
    "asciiUrl": Encoding.BASE64_URL,
    "windows1252": Encoding.WINDOWS_1252,
    "windows-1252": Encoding.WINDOWS_1252,
    "utf16": Encoding.UTF16,
    "utf-16": Encoding.UTF16,
    "utf8": Encoding.UTF8,
    "utf-8": Encoding.UTF8,
})


def resolve_encoding(name: Encoding | str) -> Encoding:
    """
    Resolve an encoding label to its canonical Encoding.

    Raises:
        UnsupportedEncodingError: If the label is not a known alias
    """
    if isinstance(name, Encoding):
        return name
    if isinstance(name, str) and name in ENCODING_ALIASES:
        return ENCODING_ALIASES[name]
    raise UnsupportedEncodingError(name)


def encoding_labels(encoding: Encoding) -> list[str]:
    """All labels accepted for an encoding, canonical label first."""
    return [label for label, target in ENCODING_ALIASES.items() if target is encoding]
