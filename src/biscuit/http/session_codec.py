"""Wire encoding for session data: a ``str -> str`` map as one cookie value.

Layout before base64::

    key1 FF value1 FF key2 FF value2 [FF ...]

``0xFF`` never occurs in UTF-8, so it works as the separator. Pad bytes
(also ``0xFF``) bring the length to a multiple of three so the base64
text has no ``=`` padding. On decode, an empty key marks the end of data,
which is how the padding is told apart from real pairs.

Decoding is total: invalid base64 or non-UTF-8 segments shrink the
result, they never raise.
"""

import base64
import binascii
from collections.abc import Mapping

SEPARATOR = 0xFF
_SEPARATOR_BYTES = bytes([SEPARATOR])


def encode_session(data: Mapping[str, str]) -> str:
    """Encode *data* as unpadded standard base64.

    Pairs are written in the mapping's iteration order, so encoding the
    same unmodified mapping twice gives the same text.

    Raises ``TypeError`` for non-``str`` keys or values.
    """
    buf = bytearray()
    for i, (key, value) in enumerate(data.items()):
        if not isinstance(key, str) or not isinstance(value, str):
            msg = (
                "Session keys and values must be str, got "
                f"{type(key).__name__} -> {type(value).__name__}"
            )
            raise TypeError(msg)
        if i:
            buf.append(SEPARATOR)
        buf += key.encode("utf-8")
        buf.append(SEPARATOR)
        buf += value.encode("utf-8")
    while len(buf) * 8 % 6:
        buf.append(SEPARATOR)
    return base64.b64encode(bytes(buf)).decode("ascii")


def decode_session(text: str) -> dict[str, str]:
    """Decode text produced by ``encode_session``; never raises."""
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raw = b""

    result: dict[str, str] = {}
    parts = iter(raw.split(_SEPARATOR_BYTES))
    for key in parts:
        value = next(parts, None)
        if value is None or not key:
            break
        try:
            result[key.decode("utf-8")] = value.decode("utf-8")
        except UnicodeDecodeError:
            continue
    return result
