"""
Byte Sequence Input
===================

Normalization of the loosely-typed inputs accepted by every codec.

A "byte sequence" may arrive as bytes, bytearray, memoryview, a numpy
integer array, any iterable of ints, or a str whose characters each stand
for one byte. Values are narrowed modulo 256, so conversion never fails.

Example:
    >>> to_bytes("Foo")
    b'Foo'
    >>> to_bytes([0x100, -1])
    b'\\x00\\xff'
"""

from typing import Iterable, Union

import numpy as np


ByteInput = Union[bytes, bytearray, memoryview, str, np.ndarray, Iterable[int]]


def to_bytes(data: ByteInput) -> bytes:
    """
    Coerce any supported byte-sequence form into immutable bytes.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        bytes with every value narrowed to 0..255
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return bytes(ord(char) & 0xFF for char in data)
    if isinstance(data, np.ndarray):
        return (data.astype(np.int64) & 0xFF).astype(np.uint8).tobytes()
    return bytes(int(value) & 0xFF for value in data)
