"""Tests for lookup tables, encoding identifiers and buffer normalization."""

import sys
from array import array

import pytest

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.constants import (
    BYTE_TO_WINDOWS_1252,
    HEX_DIGITS,
    WINDOWS_1252_TO_BYTE,
)
from byte_encodings.core.encoding import (
    ENCODING_ALIASES,
    Encoding,
    encoding_labels,
    resolve_encoding,
)
from byte_encodings.core.errors import EncodingError, UnsupportedEncodingError

WINDOWS_1252_UNDEFINED = (0x81, 0x8D, 0x8F, 0x90, 0x9D)


class TestTables:
    """Tests for the constant lookup tables."""

    def test_windows_1252_table_is_bijective(self) -> None:
        assert len(WINDOWS_1252_TO_BYTE) == 27
        assert len(set(WINDOWS_1252_TO_BYTE.values())) == 27
        assert len(BYTE_TO_WINDOWS_1252) == 27

    def test_windows_1252_table_covers_high_range(self) -> None:
        defined = set(range(0x80, 0xA0)) - set(WINDOWS_1252_UNDEFINED)
        assert set(WINDOWS_1252_TO_BYTE.values()) == defined

    def test_windows_1252_table_matches_cp1252(self) -> None:
        for char, code in WINDOWS_1252_TO_BYTE.items():
            assert char.encode("cp1252") == bytes([code])

    def test_hex_digits_case_insensitive(self) -> None:
        assert len(HEX_DIGITS) == 22
        for lower in "abcdef":
            assert HEX_DIGITS[lower] == HEX_DIGITS[lower.upper()]
        assert HEX_DIGITS["0"] == 0
        assert HEX_DIGITS["9"] == 9
        assert HEX_DIGITS["F"] == 15

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            HEX_DIGITS["g"] = 16  # type: ignore[index]


class TestEncoding:
    """Tests for encoding label resolution."""

    def test_sixteen_labels(self) -> None:
        assert len(ENCODING_ALIASES) == 16

    def test_every_encoding_has_two_labels(self) -> None:
        for encoding in Encoding:
            labels = encoding_labels(encoding)
            assert len(labels) == 2
            assert labels[0] == encoding.value

    def test_aliases(self) -> None:
        assert resolve_encoding("hex") is Encoding.BASE16
        assert resolve_encoding("base16") is Encoding.BASE16
        assert resolve_encoding("ascii") is Encoding.BASE64
        assert resolve_encoding("asciiUrl") is Encoding.BASE64_URL
        assert resolve_encoding("latin1") is Encoding.BINARY
        assert resolve_encoding("binaryString") is Encoding.BASE2
        assert resolve_encoding("windows-1252") is Encoding.WINDOWS_1252
        assert resolve_encoding("utf-16") is Encoding.UTF16
        assert resolve_encoding("utf-8") is Encoding.UTF8

    def test_member_passes_through(self) -> None:
        assert resolve_encoding(Encoding.UTF8) is Encoding.UTF8

    @pytest.mark.parametrize("name", ["nonsense", "HEX", "utf_8", "", None, 16])
    def test_unknown_label_rejected(self, name) -> None:
        with pytest.raises(UnsupportedEncodingError) as excinfo:
            resolve_encoding(name)
        assert excinfo.value.encoding == name

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(UnsupportedEncodingError, EncodingError)
        assert issubclass(EncodingError, ValueError)


class TestNormalizeToBytes:
    """Tests for buffer normalization."""

    def test_bytes_identity(self) -> None:
        data = b"abc"
        assert normalize_to_bytes(data) is data

    def test_bytearray_identity(self) -> None:
        data = bytearray(b"abc")
        assert normalize_to_bytes(data) is data

    def test_byte_view_identity(self) -> None:
        view = memoryview(b"abc")
        assert normalize_to_bytes(view) is view

    def test_uint16_native_order(self) -> None:
        result = normalize_to_bytes(array("H", [0x0102, 0x0304]))
        expected = (0x0102).to_bytes(2, sys.byteorder) + (0x0304).to_bytes(2, sys.byteorder)
        assert bytes(result) == expected

    def test_uint32_native_order(self) -> None:
        result = normalize_to_bytes(array("I", [0xDEADBEEF]))
        assert bytes(result) == (0xDEADBEEF).to_bytes(array("I").itemsize, sys.byteorder)

    def test_signed_bytes(self) -> None:
        result = normalize_to_bytes(array("b", [-1, 1]))
        assert bytes(result) == b"\xff\x01"

    def test_shares_memory(self) -> None:
        source = array("H", [0])
        view = normalize_to_bytes(source)
        source[0] = 0xFFFF
        assert bytes(view) == b"\xff\xff"

    def test_multidimensional_view(self) -> None:
        view = memoryview(bytes(range(6))).cast("B", shape=[2, 3])
        assert bytes(normalize_to_bytes(view)) == bytes(range(6))

    def test_non_contiguous_view_copied(self) -> None:
        view = memoryview(b"abcdef")[::2]
        assert normalize_to_bytes(view) == b"ace"

    @pytest.mark.parametrize("buffer", [
        b"xyz",
        bytearray(b"xyz"),
        array("H", [1, 2, 3]),
        array("l", [-5]),
        memoryview(b"abcdef")[::2],
    ])
    def test_idempotent(self, buffer) -> None:
        once = normalize_to_bytes(buffer)
        twice = normalize_to_bytes(once)
        assert twice == once
        assert twice is once

    def test_not_a_buffer(self) -> None:
        with pytest.raises(TypeError):
            normalize_to_bytes(42)
