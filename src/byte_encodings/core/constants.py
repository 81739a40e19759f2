"""Shared lookup tables for the text codecs."""

from types import MappingProxyType

# Windows-1252 characters in the 0x80-0x9F range (the C1 block in Latin-1).
# 0x81, 0x8D, 0x8F, 0x90 and 0x9D are undefined and have no entry.
# Source: https://en.wikipedia.org/wiki/Windows-1252
WINDOWS_1252_TO_BYTE: MappingProxyType[str, int] = MappingProxyType({
    '€': 0x80,  # Euro sign
    '‚': 0x82,  # Single low-9 quotation mark
    'ƒ': 0x83,  # Latin small f with hook
    '„': 0x84,  # Double low-9 quotation mark
    '…': 0x85,  # Horizontal ellipsis
    '†': 0x86,  # Dagger
    '‡': 0x87,  # Double dagger
    'ˆ': 0x88,  # Modifier circumflex
    '‰': 0x89,  # Per mille sign
    'Š': 0x8A,  # S with caron
    '‹': 0x8B,  # Single left angle quotation mark
    'Œ': 0x8C,  # Ligature OE
    'Ž': 0x8E,  # Z with caron
    '‘': 0x91,  # Left single quotation mark
    '’': 0x92,  # Right single quotation mark
    '“': 0x93,  # Left double quotation mark
    '”': 0x94,  # Right double quotation mark
    '•': 0x95,  # Bullet
    '–': 0x96,  # En dash
    '—': 0x97,  # Em dash
    '˜': 0x98,  # Small tilde
    '™': 0x99,  # Trade mark sign
    'š': 0x9A,  # s with caron
    '›': 0x9B,  # Single right angle quotation mark
    'œ': 0x9C,  # Ligature oe
    'ž': 0x9E,  # z with caron
    'Ÿ': 0x9F,  # Y with diaeresis
})

# Reverse mapping, built once
BYTE_TO_WINDOWS_1252: MappingProxyType[int, str] = MappingProxyType({
    code: char for char, code in WINDOWS_1252_TO_BYTE.items()
})

# Hex digit -> nibble value, both letter cases
HEX_DIGITS: MappingProxyType[str, int] = MappingProxyType({
    **{str(value): value for value in range(10)},
    **{char: 10 + idx for idx, char in enumerate('abcdef')},
    **{char: 10 + idx for idx, char in enumerate('ABCDEF')},
})

# Byte range that Windows-1252 remaps away from Latin-1
WINDOWS_1252_HIGH_RANGE = range(0x80, 0xA0)

BASE64_ALPHABET = frozenset(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
)
