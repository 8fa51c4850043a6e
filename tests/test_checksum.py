"""
Checksum Tests
==============

Adler-32, CRC-32 and SHA-1 against published vectors and the stdlib
reference implementations.
"""

import hashlib
import zlib

import numpy as np
import pytest

from binkit.checksum import adler32, crc32, sha1, sha1_digest


class TestAdler32:
    """Tests for the Adler-32 checksum."""

    def test_empty_input(self):
        """Verify the empty checksum is 1."""
        assert adler32(b"") == 1

    @pytest.mark.parametrize("data, expected", [
        (b"foo-bar", 0x0AA402A7),
        (b"Wikipedia", 0x11E60398),
    ])
    def test_known_vectors(self, data, expected):
        """Verify published Adler-32 values."""
        assert adler32(data) == expected

    def test_reference_buffers(self, buffer_a, buffer_b):
        """Verify the two reference buffers and their concatenation."""
        assert adler32(buffer_a) == 0x49F60A06
        assert adler32(buffer_b) == 0x3BDC06EA
        assert adler32(buffer_a + buffer_b) == 0x1C2C10EF

    def test_matches_zlib(self, pangram):
        """Verify agreement with zlib.adler32 on longer input."""
        data = pangram * 500
        assert adler32(data) == zlib.adler32(data)

    def test_accepts_loose_inputs(self):
        """Verify str, int lists and numpy arrays are accepted."""
        assert adler32("foo-bar") == 0x0AA402A7
        assert adler32(list(b"foo-bar")) == 0x0AA402A7
        assert adler32(np.frombuffer(b"foo-bar", dtype=np.uint8)) == 0x0AA402A7

    def test_narrows_out_of_range_values(self):
        """Verify values outside 0-255 are narrowed instead of raising."""
        assert adler32([0x100 + 0x66, 0x6F, 0x6F]) == adler32(b"foo")


class TestCrc32:
    """Tests for the CRC-32 checksum."""

    def test_empty_input(self):
        """Verify the empty checksum is 0."""
        assert crc32(b"") == 0

    @pytest.mark.parametrize("data, expected", [
        (b"Foo123", 0x67EDF5DB),
        (bytes([0x00, 0x1B, 0xA4, 0x00, 0x07]), 0x012F479C),
        (b"foo-bar", 0x4C2CD9E9),
        (b"Wikipedia", 0xADAAC02E),
    ])
    def test_known_vectors(self, data, expected):
        """Verify published CRC-32 values."""
        assert crc32(data) == expected

    def test_reference_buffers(self, buffer_a, buffer_b):
        """Verify the two reference buffers and their concatenation."""
        assert crc32(buffer_a) == 0x2CD129D3
        assert crc32(buffer_b) == 0x0F9640D1
        assert crc32(buffer_a + buffer_b) == 0xD48AE423

    def test_result_is_unsigned(self):
        """Verify results with the top bit set stay positive."""
        value = crc32(b"Wikipedia")
        assert 0 <= value <= 0xFFFFFFFF
        assert value & 0x80000000

    def test_matches_zlib(self, pangram):
        """Verify agreement with zlib.crc32 over every byte value."""
        data = bytes(range(256)) * 4 + pangram
        assert crc32(data) == zlib.crc32(data)


class TestSha1:
    """Tests for the SHA-1 digest."""

    @pytest.mark.parametrize("data, expected", [
        ([120, 121, 122], "66b27417d37e024c46526c2f6d358a754fc552f3"),
        ([1, 2, 3], "7037807198c22a7d2b0807371d763779a84fdfcf"),
        ([255, 255, 255], "78670e88a9c2c711124471d2f24a8dbc8ce5dba9"),
        ([0, 0, 0], "29e2dcfbb16f63bb0254df7585a15bb6fb5e927d"),
        ([], "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
        (bytes(1024), "60cacbf3d72e1e7834203da608037b1bf83b40e8"),
    ])
    def test_known_vectors(self, data, expected):
        """Verify published SHA-1 values."""
        assert sha1(data) == expected

    def test_pangrams(self, pangram):
        """Verify the classic dog/cog avalanche pair."""
        assert sha1(pangram) == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"
        assert sha1(pangram[:-3] + b"cog") == "de9f2c7fd25e1b3afad3e85a0bd17d9b100db4b3"

    @pytest.mark.parametrize("size", [55, 56, 63, 64, 65, 119, 120, 1000])
    def test_padding_boundaries(self, size):
        """Verify lengths around the 56/64-byte padding edges."""
        data = bytes(index % 251 for index in range(size))
        assert sha1(data) == hashlib.sha1(data).hexdigest()

    def test_digest_bytes(self, pangram):
        """Verify the raw digest matches hashlib."""
        digest = sha1_digest(pangram)
        assert len(digest) == 20
        assert digest == hashlib.sha1(pangram).digest()

    def test_hex_is_lowercase(self):
        """Verify hex output is 40 lowercase characters."""
        value = sha1(b"abc")
        assert len(value) == 40
        assert value == value.lower()
