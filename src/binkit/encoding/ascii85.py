"""
ASCII85 Codec
=============

Adobe-style ASCII85: every 4 bytes become 5 characters in "!".."u",
with "z" abbreviating a group of four NUL bytes.

Design Rules:
    - Encoding emits no "<~" / "~>" delimiters
    - A final partial group of n bytes encodes to n + 1 characters
    - Decoding skips a leading "<~", stops at "~" and ignores whitespace
"""

import logging

from binkit.byteseq import ByteInput, to_bytes
from binkit.errors import InvalidCharacterError, MalformedInputError


logger = logging.getLogger(__name__)

ASCII85_OFFSET = 33
ASCII85_MAX_DIGIT = 84

_POWERS = (85 ** 4, 85 ** 3, 85 ** 2, 85, 1)


def ascii85_encode(data: ByteInput) -> str:
    """
    Encode a byte sequence as ASCII85 text.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        ASCII85 text without delimiters
    """
    raw = to_bytes(data)
    chars = []
    for offset in range(0, len(raw), 4):
        chunk = raw[offset:offset + 4]
        if chunk == b"\x00\x00\x00\x00":
            chars.append("z")
            continue

        block = int.from_bytes(chunk.ljust(4, b"\x00"), "big")
        digits = [chr(block // power % 85 + ASCII85_OFFSET) for power in _POWERS]
        chars.extend(digits[:len(chunk) + 1])
    return "".join(chars)


def _flush(group: list, decoded: bytearray, offset: int) -> None:
    count = len(group)
    group.extend([ASCII85_MAX_DIGIT] * (5 - count))
    block = sum(digit * power for digit, power in zip(group, _POWERS))
    if block > 0xFFFFFFFF:
        raise MalformedInputError(f"ASCII85 group overflows 32 bits at offset {offset}", offset)
    decoded.extend(block.to_bytes(4, "big")[:count - 1])
    group.clear()


def ascii85_decode(data: str) -> bytes:
    """
    Decode ASCII85 text.

    Args:
        data: ASCII85 text, optionally wrapped in "<~" ... "~>"

    Returns:
        Decoded bytes

    Raises:
        InvalidCharacterError: On a character outside "!".."u"
        MalformedInputError: On a "z" inside a group
    """
    start = 2 if data.startswith("<~") else 0
    decoded = bytearray()
    group = []
    for offset in range(start, len(data)):
        char = data[offset]
        if char == "~":
            break
        if char.isspace():
            continue
        if char == "z":
            if group:
                raise MalformedInputError("Unexpected `z` shorthand", offset)
            decoded.extend(b"\x00\x00\x00\x00")
            continue

        digit = ord(char) - ASCII85_OFFSET
        if not 0 <= digit <= ASCII85_MAX_DIGIT:
            raise InvalidCharacterError(f'Unexpected character "{char}"', char)
        group.append(digit)
        if len(group) == 5:
            _flush(group, decoded, offset)

    if len(group) == 1:
        logger.debug("Ignoring a single trailing ASCII85 digit")
    elif group:
        _flush(group, decoded, len(data))
    return bytes(decoded)
