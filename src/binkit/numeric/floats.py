"""
Float Byte Conversions
======================

IEEE-754 single and double precision decoding from raw bit patterns.

Decoding splits each word into sign, exponent and mantissa and rebuilds
the value with math.ldexp, so the result never depends on the platform's
own float parsing. Signed zero, infinities, NaN and subnormals are all
reproduced.
"""

import math
from typing import Iterable, Union

import numpy as np

from binkit.byteseq import ByteInput
from binkit.numeric.integers import bytes_to_uint32, bytes_to_uint64


FloatInput = Union[float, Iterable[float]]


def decode_ieee754(bits: int, exponent_bits: int, mantissa_bits: int) -> float:
    """
    Rebuild a float from its IEEE-754 bit pattern.

    Args:
        bits: The raw word
        exponent_bits: Width of the exponent field (8 or 11)
        mantissa_bits: Width of the fraction field (23 or 52)

    Returns:
        The decoded value as a Python float
    """
    sign = -1.0 if bits >> (exponent_bits + mantissa_bits) & 1 else 1.0
    exponent = (bits >> mantissa_bits) & ((1 << exponent_bits) - 1)
    mantissa = bits & ((1 << mantissa_bits) - 1)
    bias = (1 << (exponent_bits - 1)) - 1

    if exponent == (1 << exponent_bits) - 1:
        return math.nan if mantissa else sign * math.inf
    if exponent == 0:
        # Subnormal (or zero): no implicit leading bit
        return sign * math.ldexp(mantissa, 1 - bias - mantissa_bits)
    return sign * math.ldexp(mantissa | (1 << mantissa_bits), exponent - bias - mantissa_bits)


def bytes_to_float32(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """
    Decode 32-bit IEEE-754 floats.

    Args:
        data: Byte sequence; a trailing partial word is zero-filled
        little_endian: Read words least significant byte first

    Returns:
        np.ndarray of dtype float32
    """
    words = bytes_to_uint32(data, little_endian).tolist()
    return np.array([decode_ieee754(word, 8, 23) for word in words], dtype=np.float32)


def bytes_to_float64(data: ByteInput, little_endian: bool = False) -> np.ndarray:
    """Decode 64-bit IEEE-754 floats into a float64 array."""
    words = bytes_to_uint64(data, little_endian).tolist()
    return np.array([decode_ieee754(word, 11, 52) for word in words], dtype=np.float64)


def float32_to_bytes(values: FloatInput, little_endian: bool = False) -> bytes:
    """Pack floats as 32-bit IEEE-754 words."""
    if isinstance(values, (int, float)):
        values = [values]
    return np.array(list(values), dtype="<f4" if little_endian else ">f4").tobytes()


def float64_to_bytes(values: FloatInput, little_endian: bool = False) -> bytes:
    """Pack floats as 64-bit IEEE-754 words."""
    if isinstance(values, (int, float)):
        values = [values]
    return np.array(list(values), dtype="<f8" if little_endian else ">f8").tobytes()
