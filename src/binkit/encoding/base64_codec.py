"""
Base64 Codec
============

MIME base64 (RFC 2045 alphabet, "=" padding) implemented directly over
byte sequences.

Design Rules:
    - Text input is narrowed one byte per character, never UTF-8 encoded
    - Decoding discards characters outside the alphabet, so line breaks
      and stray whitespace are harmless
    - "=" pads only its own quad; concatenated padded blocks all decode
    - Unpadded input decodes as if it were padded

Example:
    >>> base64_encode(b"FooBar")
    'Rm9vQmFy'
    >>> base64_decode("Rm9v\\nQmFy")
    b'FooBar'
"""

import re
from typing import Union

from binkit.byteseq import ByteInput, to_bytes


BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

BASE64_INDEX = {char: index for index, char in enumerate(BASE64_ALPHABET)}

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/=]")


def base64_encode(data: ByteInput) -> str:
    """
    Encode a byte sequence as padded base64 text.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        Base64 string whose length is a multiple of 4
    """
    raw = to_bytes(data)
    chars = []
    for offset in range(0, len(raw), 3):
        chunk = raw[offset:offset + 3]
        block = int.from_bytes(chunk.ljust(3, b"\x00"), "big")
        for position in range(len(chunk) + 1):
            chars.append(BASE64_ALPHABET[(block >> (18 - 6 * position)) & 0x3F])

    encoded = "".join(chars)
    return encoded + "=" * (-len(encoded) % 4)


def base64_decode(data: Union[str, bytes], as_text: bool = False) -> Union[bytes, str]:
    """
    Decode base64 text.

    Args:
        data: Base64 text; bytes are read as Latin-1
        as_text: Return a Latin-1 string (one char per byte) instead of bytes

    Returns:
        Decoded bytes, or str when as_text is set
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")

    cleaned = _NON_ALPHABET.sub("", data)
    decoded = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(cleaned):
        if position % 4 == 0:
            # Padding only closes its own quad
            buffer = bits = 0
        if char == "=":
            continue
        buffer = ((buffer << 6) | BASE64_INDEX[char]) & 0xFFFFFF
        bits += 6
        if bits >= 8:
            bits -= 8
            decoded.append((buffer >> bits) & 0xFF)

    if as_text:
        return decoded.decode("latin-1")
    return bytes(decoded)
