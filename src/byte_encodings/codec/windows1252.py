"""Windows-1252 (CP1252) character set conversion."""

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.constants import (
    BYTE_TO_WINDOWS_1252,
    WINDOWS_1252_HIGH_RANGE,
    WINDOWS_1252_TO_BYTE,
)
from byte_encodings.core.errors import InvalidInputError

ENCODING = "windows1252"


def windows1252_to_bytes(text: str) -> bytes:
    """
    Convert a string to Windows-1252 bytes.

    The 27 punctuation and letter characters of the 0x80-0x9F block are
    remapped; every other character up to U+00FF passes through as its
    code point.
    """
    result = bytearray(len(text))
    for i, char in enumerate(text):
        if char in WINDOWS_1252_TO_BYTE:
            result[i] = WINDOWS_1252_TO_BYTE[char]
        elif ord(char) <= 0xFF:
            result[i] = ord(char)
        else:
            raise InvalidInputError(
                f"Invalid windows-1252 character: {char!r}", ENCODING, i
            )
    return bytes(result)


def bytes_to_windows1252(buffer) -> str:
    """Convert Windows-1252 bytes to a string, rejecting undefined bytes."""
    chars = []
    for i, byte in enumerate(normalize_to_bytes(buffer)):
        if byte in WINDOWS_1252_HIGH_RANGE:
            if byte not in BYTE_TO_WINDOWS_1252:
                raise InvalidInputError(
                    f"Byte 0x{byte:02x} is undefined in windows-1252", ENCODING, i
                )
            chars.append(BYTE_TO_WINDOWS_1252[byte])
        else:
            chars.append(chr(byte))
    return ''.join(chars)
