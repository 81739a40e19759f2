"""Bytes as strings of '0' and '1' characters."""

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.errors import InvalidInputError

ENCODING = "base2"


def bit_string_to_bytes(bits: str) -> bytes:
    """
    Parse a string of binary digits, eight per byte.

    A final group shorter than eight digits is zero-padded on the right,
    so ``"1"`` decodes to ``0x80``.
    """
    result = bytearray()
    for start in range(0, len(bits), 8):
        group = bits[start:start + 8]
        for offset, char in enumerate(group):
            if char not in '01':
                raise InvalidInputError(
                    "Binary string must only contain 0 or 1",
                    ENCODING,
                    start + offset,
                )
        result.append(int(group.ljust(8, '0'), 2))
    return bytes(result)


def bytes_to_bit_string(buffer) -> str:
    """Render each byte as eight binary digits, most significant first."""
    return ''.join(format(byte, '08b') for byte in normalize_to_bytes(buffer))
