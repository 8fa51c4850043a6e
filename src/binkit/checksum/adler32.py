"""
Adler-32 Checksum
=================

RFC 1950 Adler-32: two running sums modulo the largest prime below 2^16.
"""

from binkit.byteseq import ByteInput, to_bytes


MOD_ADLER = 65521


def adler32(data: ByteInput) -> int:
    """
    Compute the Adler-32 checksum of a byte sequence.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        Unsigned 32-bit checksum; 1 for empty input
    """
    a, b = 1, 0
    for byte in to_bytes(data):
        a = (a + byte) % MOD_ADLER
        b = (b + a) % MOD_ADLER
    return (b << 16) | a
