"""Exceptions raised by the codecs and dispatchers."""

from __future__ import annotations


class EncodingError(ValueError):
    """Base class for every error caused by bad input to the library."""


class UnsupportedEncodingError(EncodingError):
    """The requested encoding label is not one of the known labels."""

    def __init__(self, encoding: object) -> None:
        super().__init__(f"Encoding {encoding!r} not supported.")
        self.encoding = encoding


class InvalidInputError(EncodingError):
    """
    The input does not follow the grammar of the requested encoding.

    Attributes:
        encoding: Canonical label of the codec that rejected the input
        position: Index of the offending character or byte, if known
    """

    def __init__(
        self,
        message: str,
        encoding: str,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.encoding = encoding
        self.position = position

    def __str__(self) -> str:
        base = f"[{self.encoding}] {self.args[0]}"
        if self.position is not None:
            return f"{base} (at index {self.position})"
        return base
