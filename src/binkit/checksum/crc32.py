"""
CRC-32 Checksum
===============

Table-driven CRC-32 with the reflected IEEE polynomial 0xEDB88320, as
used by zlib, gzip and PNG.

Design Rules:
    - Register is seeded with all ones and complemented at the end
    - Result is always an unsigned 32-bit integer
"""

from typing import Tuple

from binkit.byteseq import ByteInput, to_bytes


CRC32_POLYNOMIAL = 0xEDB88320


def _build_table() -> Tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ CRC32_POLYNOMIAL if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


CRC32_TABLE = _build_table()


def crc32(data: ByteInput) -> int:
    """
    Compute the CRC-32 of a byte sequence.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        Unsigned 32-bit checksum; 0 for empty input
    """
    crc = 0xFFFFFFFF
    for byte in to_bytes(data):
        crc = (crc >> 8) ^ CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFFFFFF
