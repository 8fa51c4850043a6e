"""
32-bit Rotation Primitives
==========================

Circular shifts on unsigned 32-bit words, as used by SHA-1.
"""

WORD_MASK = 0xFFFFFFFF


def rotl(value: int, count: int) -> int:
    """Rotate a 32-bit word left; count is taken modulo 32."""
    value &= WORD_MASK
    count %= 32
    return ((value << count) | (value >> (32 - count))) & WORD_MASK


def rotr(value: int, count: int) -> int:
    """Rotate a 32-bit word right; count is taken modulo 32."""
    value &= WORD_MASK
    count %= 32
    return ((value >> count) | (value << (32 - count))) & WORD_MASK
