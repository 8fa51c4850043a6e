"""
Solid-Colour PNG Generator
==========================

Builds a complete 4x4 RGBA PNG filled with one colour, without an
image library. Useful as a deterministic test vector.

Stream Layout:
    signature
    IHDR   4x4, bit depth 8, colour type 6 (RGBA), no interlace
    IDAT   zlib header 08 1D, one stored deflate block, Adler-32
    IEND

Scanlines:
    row 0     filter 1 (Sub): the pixel, then zero deltas
    rows 1-3  filter 2 (Up): zero deltas
    so every reconstructed pixel equals the requested colour.

Example:
    >>> png = rgba(255, 0, 0, 255)
    >>> png[:8]
    b'\\x89PNG\\r\\n\\x1a\\n'
"""

from binkit.checksum.adler32 import adler32
from binkit.checksum.crc32 import crc32
from binkit.encoding.base64_codec import base64_encode
from binkit.numeric.integers import uint16_to_bytes, uint32_to_bytes


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

IMAGE_SIZE = 4
BIT_DEPTH = 8
COLOUR_TYPE_RGBA = 6

FILTER_SUB = 1
FILTER_UP = 2

ZLIB_HEADER = b"\x08\x1d"
DEFLATE_FINAL_STORED_BLOCK = 0x01


def _chunk(chunk_type: bytes, data: bytes) -> bytes:
    return uint32_to_bytes(len(data)) + chunk_type + data + uint32_to_bytes(crc32(chunk_type + data))


def _scanlines(red: int, green: int, blue: int, alpha: int) -> bytes:
    row_bytes = IMAGE_SIZE * 4
    first = bytes([FILTER_SUB, red, green, blue, alpha]) + b"\x00" * (row_bytes - 4)
    rest = (bytes([FILTER_UP]) + b"\x00" * row_bytes) * (IMAGE_SIZE - 1)
    return first + rest


def _zlib_stored(data: bytes) -> bytes:
    # Stored block: BFINAL=1, BTYPE=00, then LEN and its complement (little-endian)
    block_header = (
        bytes([DEFLATE_FINAL_STORED_BLOCK])
        + uint16_to_bytes(len(data), little_endian=True)
        + uint16_to_bytes(~len(data), little_endian=True)
    )
    return ZLIB_HEADER + block_header + data + uint32_to_bytes(adler32(data))


def rgba(red: int, green: int, blue: int, alpha: int) -> bytes:
    """
    Build a 4x4 PNG of a single RGBA colour.

    Args:
        red: Red component, 0-255
        green: Green component, 0-255
        blue: Blue component, 0-255
        alpha: Alpha component, 0-255

    Returns:
        Complete PNG file bytes

    Raises:
        ValueError: If a component is outside 0-255
    """
    for name, value in (("red", red), ("green", green), ("blue", blue), ("alpha", alpha)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be in 0-255, got {value}")

    header = uint32_to_bytes([IMAGE_SIZE, IMAGE_SIZE]) + bytes([BIT_DEPTH, COLOUR_TYPE_RGBA, 0, 0, 0])
    return (
        PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", _zlib_stored(_scanlines(red, green, blue, alpha)))
        + _chunk(b"IEND", b"")
    )


def rgba_base64(red: int, green: int, blue: int, alpha: int) -> str:
    """Build the same PNG as rgba() and return it base64 encoded."""
    return base64_encode(rgba(red, green, blue, alpha))
