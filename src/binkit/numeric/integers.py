"""
Integer Byte Conversions
========================

Fixed-width integer <-> byte sequence conversions for 8/16/32/64-bit
signed and unsigned words, big-endian by default.

Design Rules:
    - Unpacking zero-fills a trailing partial word (padding goes after
      the input bytes, whatever the endianness)
    - Packing narrows each value modulo 2^width (two's complement)
    - Neither direction raises for any input
    - Unpacked words come back as numpy arrays of the native dtype

Example:
    >>> bytes_to_uint32([0xAB, 0xCD, 0xEF, 0x12]).tolist()
    [2882400018]
    >>> uint16_to_bytes([0xABCD, 0x34])
    b'\\xab\\xcd\\x004'
"""

from typing import Iterable, Union

import numpy as np

from binkit.byteseq import ByteInput, to_bytes


IntInput = Union[int, np.integer, Iterable[int]]


def _unpack(data: ByteInput, width: int, signed: bool, little_endian: bool) -> np.ndarray:
    raw = to_bytes(data)
    remainder = len(raw) % width
    if remainder:
        raw += b"\x00" * (width - remainder)

    kind = "i" if signed else "u"
    wire = np.dtype(f"{'<' if little_endian else '>'}{kind}{width}")
    return np.frombuffer(raw, dtype=wire).astype(np.dtype(f"{kind}{width}"))


def _pack(values: IntInput, width: int, little_endian: bool) -> bytes:
    if isinstance(values, (int, np.integer)):
        values = [values]

    mask = (1 << (width * 8)) - 1
    words = [int(value) & mask for value in values]
    wire = np.dtype(f"{'<' if little_endian else '>'}u{width}")
    return np.array(words, dtype=wire).tobytes()


# =============================================================================
# Bytes -> Integers
# =============================================================================

def bytes_to_int8(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack signed 8-bit integers."""
    return _unpack(data, 1, True, little_endian)


def bytes_to_uint8(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack unsigned 8-bit integers."""
    return _unpack(data, 1, False, little_endian)


def bytes_to_int16(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack signed 16-bit integers."""
    return _unpack(data, 2, True, little_endian)


def bytes_to_uint16(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack unsigned 16-bit integers."""
    return _unpack(data, 2, False, little_endian)


def bytes_to_int32(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack signed 32-bit integers."""
    return _unpack(data, 4, True, little_endian)


def bytes_to_uint32(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """
    Unpack unsigned 32-bit integers.

    Args:
        data: Byte sequence; a trailing partial word is zero-filled
        little_endian: Read words least significant byte first

    Returns:
        np.ndarray of dtype uint32
    """
    return _unpack(data, 4, False, little_endian)


def bytes_to_int64(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack signed 64-bit integers."""
    return _unpack(data, 8, True, little_endian)


def bytes_to_uint64(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Unpack unsigned 64-bit integers."""
    return _unpack(data, 8, False, little_endian)


# =============================================================================
# Integers -> Bytes
# =============================================================================

def int8_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack signed 8-bit integers."""
    return _pack(values, 1, little_endian)


def uint8_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack unsigned 8-bit integers."""
    return _pack(values, 1, little_endian)


def int16_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack signed 16-bit integers."""
    return _pack(values, 2, little_endian)


def uint16_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack unsigned 16-bit integers."""
    return _pack(values, 2, little_endian)


def int32_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack signed 32-bit integers."""
    return _pack(values, 4, little_endian)


def uint32_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """
    Pack unsigned 32-bit integers.

    Args:
        values: A single integer or a sequence of integers
        little_endian: Write words least significant byte first

    Returns:
        Packed bytes, four per value
    """
    return _pack(values, 4, little_endian)


def int64_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack signed 64-bit integers."""
    return _pack(values, 8, little_endian)


def uint64_to_bytes(values: IntInput, little_endian: bool = False) -> bytes:
    """Pack unsigned 64-bit integers."""
    return _pack(values, 8, little_endian)
