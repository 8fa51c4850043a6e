"""
Base64 VLQ Codec
================

Signed variable-length quantities in base64 digits, as used by source
maps. Each digit carries 5 data bits and a continuation bit (0x20); the
least significant bit of the first quantum is the sign.

Design Rules:
    - decode(encode(n)) == n for every integer
    - The "negative zero" quantum "B" stands for -2^31 in both directions
    - Characters outside the base64 alphabet are rejected by name

Example:
    >>> vlq_encode(-45)
    '7C'
    >>> vlq_decode("IGAM")
    [4, 3, 0, 6]
"""

from typing import Iterable, List, Union

import numpy as np

from binkit.encoding.base64_codec import BASE64_ALPHABET, BASE64_INDEX
from binkit.errors import InvalidCharacterError, MalformedInputError


VLQ_BASE_SHIFT = 5
VLQ_BASE_MASK = 0x1F
VLQ_CONTINUATION_BIT = 0x20

NEGATIVE_ZERO_VALUE = -0x80000000


def _encode_one(value: int) -> str:
    if value == NEGATIVE_ZERO_VALUE:
        return BASE64_ALPHABET[1]

    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    digits = []
    while True:
        digit = vlq & VLQ_BASE_MASK
        vlq >>= VLQ_BASE_SHIFT
        if vlq:
            digit |= VLQ_CONTINUATION_BIT
        digits.append(BASE64_ALPHABET[digit])
        if not vlq:
            return "".join(digits)


def vlq_encode(value: Union[int, Iterable[int]]) -> str:
    """
    Encode one integer, or a sequence of integers concatenated.

    Args:
        value: Integer or iterable of integers

    Returns:
        Base64 VLQ string
    """
    if isinstance(value, (int, np.integer)):
        return _encode_one(int(value))
    return "".join(_encode_one(int(item)) for item in value)


def vlq_decode(data: str) -> List[int]:
    """
    Decode a run of base64 VLQ integers.

    Args:
        data: Base64 VLQ string

    Returns:
        List of decoded integers

    Raises:
        InvalidCharacterError: If a character is not a base64 digit
        MalformedInputError: If the string ends inside a quantum
    """
    values = []
    accumulator = 0
    shift = 0
    start = 0
    for offset, char in enumerate(data):
        digit = BASE64_INDEX.get(char)
        if digit is None:
            raise InvalidCharacterError(f"Bad character: {char}", char)
        if shift == 0:
            start = offset

        accumulator |= (digit & VLQ_BASE_MASK) << shift
        if digit & VLQ_CONTINUATION_BIT:
            shift += VLQ_BASE_SHIFT
            continue

        magnitude = accumulator >> 1
        if accumulator & 1:
            values.append(-magnitude if magnitude else NEGATIVE_ZERO_VALUE)
        else:
            values.append(magnitude)
        accumulator = 0
        shift = 0

    if shift:
        raise MalformedInputError(f"Unterminated VLQ quantum at offset {start}", start)
    return values
