"""
PNG Generator Tests
===================

Byte layout, checksums and pixel reconstruction of the solid-colour PNG.
"""

import base64
import hashlib
import zlib

import numpy as np
import pytest

from binkit.image import PNG_SIGNATURE, rgba, rgba_base64
from binkit.numeric import bytes_to_uint32


IHDR_PREFIX = bytes.fromhex(
    "89504e470d0a1a0a"
    "0000000d49484452"
    "00000004000000040806000000"
    "a9f19e7e"
)

IEND_CHUNK = bytes.fromhex("0000000049454e44ae426082")


def _chunks(png: bytes):
    offset = len(PNG_SIGNATURE)
    while offset < len(png):
        length = int(bytes_to_uint32(png[offset:offset + 4])[0])
        chunk_type = png[offset + 4:offset + 8]
        data = png[offset + 8:offset + 8 + length]
        crc = int(bytes_to_uint32(png[offset + 8 + length:offset + 12 + length])[0])
        yield chunk_type, data, crc
        offset += 12 + length


def _reconstruct(scanlines: bytes) -> np.ndarray:
    """Undo the Sub/Up filters of a 4x4 RGBA image."""
    rows = np.frombuffer(scanlines, dtype=np.uint8).reshape(4, 17)
    pixels = np.zeros((4, 16), dtype=np.uint8)
    for y in range(4):
        filter_type, line = rows[y, 0], rows[y, 1:]
        if filter_type == 1:
            for x in range(16):
                left = pixels[y, x - 4] if x >= 4 else 0
                pixels[y, x] = (int(line[x]) + int(left)) & 0xFF
        elif filter_type == 2:
            above = pixels[y - 1] if y else np.zeros(16, dtype=np.uint8)
            pixels[y] = line + above
        else:
            pixels[y] = line
    return pixels.reshape(4, 4, 4)


class TestRgbaPng:
    """Tests for the solid-colour PNG generator."""

    @pytest.mark.parametrize("colour, digest", [
        ((0xFF, 0x00, 0x00, 0xFF), "b31f0478d976ce5749f86344211aeeba41de065e"),
        ((0x00, 0xFF, 0x00, 0xFF), "4b594c3fa919b925992d97255ca29bf1e25c08a6"),
        ((0x00, 0x00, 0xFF, 0xFF), "9ee13be59305affc103d687909496822ac40d920"),
        ((0xFF, 0xFF, 0xFF, 0xFF), "5372946ce021a6956209135e2426bceb3a47e239"),
        ((0x00, 0x00, 0x00, 0xFF), "ec6f28cd5ebed9bc95053fed3a2018bfff3e0596"),
    ])
    def test_golden_files(self, colour, digest):
        """Verify byte-exact output against reference files."""
        assert hashlib.sha1(rgba(*colour)).hexdigest() == digest

    def test_fixed_header(self):
        """Verify the signature and precomputed IHDR chunk."""
        png = rgba(1, 2, 3, 4)
        assert png.startswith(IHDR_PREFIX)
        assert png.endswith(IEND_CHUNK)
        assert len(png) == 136

    def test_chunk_crcs(self):
        """Verify every chunk CRC covers type and data."""
        chunks = list(_chunks(rgba(10, 20, 30, 40)))
        assert [chunk_type for chunk_type, _, _ in chunks] == [b"IHDR", b"IDAT", b"IEND"]
        for chunk_type, data, crc in chunks:
            assert crc == zlib.crc32(chunk_type + data)

    def test_idat_is_stored_zlib_stream(self):
        """Verify the zlib header, stored block and Adler-32 trailer."""
        idat = dict((t, d) for t, d, _ in _chunks(rgba(10, 20, 30, 40)))[b"IDAT"]
        assert len(idat) == 79
        assert idat[:7] == bytes([0x08, 0x1D, 0x01, 0x44, 0x00, 0xBB, 0xFF])
        scanlines = zlib.decompress(idat)
        assert len(scanlines) == 68
        assert idat[-4:] == zlib.adler32(scanlines).to_bytes(4, "big")

    def test_every_pixel_matches(self):
        """Verify the filtered scanlines reconstruct the requested colour."""
        idat = dict((t, d) for t, d, _ in _chunks(rgba(10, 20, 30, 40)))[b"IDAT"]
        pixels = _reconstruct(zlib.decompress(idat))
        assert (pixels == np.array([10, 20, 30, 40], dtype=np.uint8)).all()

    def test_base64_form(self):
        """Verify the base64 variant encodes the same bytes."""
        assert rgba_base64(255, 0, 0, 255) == base64.b64encode(rgba(255, 0, 0, 255)).decode("ascii")

    @pytest.mark.parametrize("colour", [(256, 0, 0, 0), (0, -1, 0, 0)])
    def test_rejects_out_of_range(self, colour):
        """Verify components outside 0-255 raise."""
        with pytest.raises(ValueError):
            rgba(*colour)
