"""UTF-8."""

from byte_encodings.core.buffer import normalize_to_bytes
from byte_encodings.core.errors import InvalidInputError
from byte_encodings.codec.utf16 import NATIVE_CODEC

ENCODING = "utf8"


def utf8_to_bytes(text: str) -> bytes:
    """
    Encode text as UTF-8.

    Never fails: surrogate pairs stored as two code points are joined and
    lone surrogates become U+FFFD.
    """
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError:
        scrubbed = text.encode(NATIVE_CODEC, 'surrogatepass').decode(NATIVE_CODEC, 'replace')
        return scrubbed.encode('utf-8')


def bytes_to_utf8(buffer) -> str:
    """Strictly decode UTF-8."""
    try:
        return bytes(normalize_to_bytes(buffer)).decode('utf-8')
    except UnicodeDecodeError as exc:
        raise InvalidInputError(
            f"Invalid UTF-8 data: {exc.reason}", ENCODING, exc.start
        ) from exc
