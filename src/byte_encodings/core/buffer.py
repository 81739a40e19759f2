"""Reinterpret integer buffers as byte buffers."""

from __future__ import annotations

from typing import Union

# Anything exporting the buffer protocol: bytes, bytearray, memoryview,
# array.array of any integer item size.
ByteBuffer = Union[bytes, bytearray, memoryview]


def normalize_to_bytes(buffer) -> ByteBuffer:
    """
    Return a byte-addressable view over the same memory as ``buffer``.

    Multi-byte items are laid out in native byte order. ``bytes``,
    ``bytearray`` and unsigned-byte memoryviews are returned unchanged.
    Non-contiguous views cannot be cast in place and are copied.
    """
    if isinstance(buffer, (bytes, bytearray)):
        return buffer

    view = buffer if isinstance(buffer, memoryview) else memoryview(buffer)
    if view.format == 'B' and view.ndim == 1:
        return view
    if not view.c_contiguous:
        return view.tobytes()
    return view.cast('B')
