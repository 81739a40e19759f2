"""UTF-16 in native byte order."""

import sys

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.errors import InvalidInputError

ENCODING = "utf16"

NATIVE_CODEC = 'utf-16-le' if sys.byteorder == 'little' else 'utf-16-be'


def utf16_to_bytes(text: str) -> bytes:
    """
    Pack each UTF-16 code unit as two native-order bytes.

    Characters outside the BMP take a surrogate pair. Lone surrogates are
    packed as they are.
    """
    return text.encode(NATIVE_CODEC, 'surrogatepass')


def bytes_to_utf16(buffer) -> str:
    """
    Strictly decode native-order UTF-16.

    A leading native byte-order mark is dropped. A byte-swapped mark does
    not switch the byte order; it decodes as U+FFFE.
    """
    try:
        text = bytes(normalize_to_bytes(buffer)).decode(NATIVE_CODEC)
    except UnicodeDecodeError as exc:
        raise InvalidInputError(
            f"Invalid UTF-16 data: {exc.reason}", ENCODING, exc.start
        ) from exc
    return text[1:] if text.startswith('\ufeff') else text
