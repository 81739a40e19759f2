"""Raw 8-bit strings: one character per byte (Latin-1)."""

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.errors import InvalidInputError

ENCODING = "binary"


def binary_to_bytes(text: str) -> bytes:
    """Convert each character's code point to one byte."""
    result = bytearray(len(text))
    for i, char in enumerate(text):
        code = ord(char)
        if code > 0xFF:
            raise InvalidInputError(f"Invalid binary character: {char!r}", ENCODING, i)
        result[i] = code
    return bytes(result)


def bytes_to_binary(buffer) -> str:
    """Convert each byte to the character with the same code point."""
    return bytes(normalize_to_bytes(buffer)).decode('latin-1')


latin1_to_bytes = binary_to_bytes
bytes_to_latin1 = bytes_to_binary
