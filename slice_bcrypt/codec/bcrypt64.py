"""
Bcrypt Base64
=============
The base64 variant used by bcrypt crypt strings.

Not RFC 4648: the alphabet starts with "./" followed by A-Z, a-z, 0-9,
and output is never padded with "=".
"""

from ..exceptions import InvalidSaltError

ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def encoded_length(length: int) -> int:
    """Number of characters produced for `length` raw bytes."""
    return (length * 4 + 2) // 3


def encode(data: bytes) -> str:
    """
    Encode raw bytes without padding.

    Args:
        data: Bytes to encode

    Returns:
        Encoded string (22 characters for 16 bytes, 31 for 23)
    """
    out = []
    length = len(data)
    i = 0
    while i < length:
        c1 = data[i]
        i += 1
        out.append(ALPHABET[c1 >> 2])
        c1 = (c1 & 0x03) << 4
        if i >= length:
            out.append(ALPHABET[c1])
            break
        c2 = data[i]
        i += 1
        c1 |= (c2 >> 4) & 0x0F
        out.append(ALPHABET[c1])
        c1 = (c2 & 0x0F) << 2
        if i >= length:
            out.append(ALPHABET[c1])
            break
        c2 = data[i]
        i += 1
        c1 |= (c2 >> 6) & 0x03
        out.append(ALPHABET[c1])
        out.append(ALPHABET[c2 & 0x3F])
    return "".join(out)


def _lookup(text: str, pos: int) -> int:
    try:
        return _INDEX[text[pos]]
    except (IndexError, KeyError):
        raise InvalidSaltError(
            "Invalid bcrypt base64 data",
            value=text,
        ) from None


def decode(text: str, length: int) -> bytearray:
    """
    Decode exactly `length` bytes from the start of `text`.

    Unused low bits of the last character are ignored, so several
    encodings can map to the same bytes.

    Raises:
        InvalidSaltError: On a character outside the alphabet, or if
            `text` runs out before `length` bytes are produced
    """
    buffer = bytearray()
    pos = 0
    while len(buffer) < length:
        c1 = _lookup(text, pos)
        c2 = _lookup(text, pos + 1)
        buffer.append(((c1 << 2) | ((c2 & 0x30) >> 4)) & 0xFF)
        if len(buffer) >= length:
            break

        c3 = _lookup(text, pos + 2)
        buffer.append((((c2 & 0x0F) << 4) | ((c3 & 0x3C) >> 2)) & 0xFF)
        if len(buffer) >= length:
            break

        c4 = _lookup(text, pos + 3)
        buffer.append((((c3 & 0x03) << 6) | c4) & 0xFF)
        pos += 4
    return buffer
