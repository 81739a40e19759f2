"""Hexadecimal (base16) strings."""

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.constants import HEX_DIGITS
from byte_encodings.core.errors import InvalidInputError

ENCODING = "base16"


def _nibble(hex_str: str, index: int) -> int:
    value = HEX_DIGITS.get(hex_str[index])
    if value is None:
        raise InvalidInputError(
            "Hex must only contain digits and letters a to f",
            ENCODING,
            index,
        )
    return value


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Parse hex digits two at a time, case-insensitive.

    With an odd number of digits the last one is read as the low nibble
    of a final byte: ``"abd"`` gives ``b"\\xab\\x0d"``.
    """
    result = bytearray()
    pairs_end = len(hex_str) - len(hex_str) % 2
    for i in range(0, pairs_end, 2):
        result.append(_nibble(hex_str, i) << 4 | _nibble(hex_str, i + 1))
    if pairs_end < len(hex_str):
        result.append(_nibble(hex_str, pairs_end))
    return bytes(result)


def bytes_to_hex(buffer) -> str:
    """Two lowercase hex digits per byte."""
    return bytes(normalize_to_bytes(buffer)).hex()


base16_to_bytes = hex_to_bytes
bytes_to_base16 = bytes_to_hex
