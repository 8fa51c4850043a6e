"""
Numeric Conversions
===================

Fixed-width integer and IEEE-754 float conversions between byte
sequences and numbers, plus 32-bit rotation primitives.
"""

from binkit.numeric.bits import rotl, rotr
from binkit.numeric.floats import (
    bytes_to_float32,
    bytes_to_float64,
    float32_to_bytes,
    float64_to_bytes,
)
from binkit.numeric.integers import (
    bytes_to_int8,
    bytes_to_int16,
    bytes_to_int32,
    bytes_to_int64,
    bytes_to_uint8,
    bytes_to_uint16,
    bytes_to_uint32,
    bytes_to_uint64,
    int8_to_bytes,
    int16_to_bytes,
    int32_to_bytes,
    int64_to_bytes,
    uint8_to_bytes,
    uint16_to_bytes,
    uint32_to_bytes,
    uint64_to_bytes,
)

__all__ = [
    # Bytes -> integers
    "bytes_to_int8",
    "bytes_to_uint8",
    "bytes_to_int16",
    "bytes_to_uint16",
    "bytes_to_int32",
    "bytes_to_uint32",
    "bytes_to_int64",
    "bytes_to_uint64",
    # Integers -> bytes
    "int8_to_bytes",
    "uint8_to_bytes",
    "int16_to_bytes",
    "uint16_to_bytes",
    "int32_to_bytes",
    "uint32_to_bytes",
    "int64_to_bytes",
    "uint64_to_bytes",
    # Floats
    "bytes_to_float32",
    "bytes_to_float64",
    "float32_to_bytes",
    "float64_to_bytes",
    # Bits
    "rotl",
    "rotr",
]
