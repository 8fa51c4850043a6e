"""
Text Encoding Tests
===================

Base64, base64 VLQ and ASCII85.
"""

import base64

import numpy as np
import pytest

from binkit.encoding import (
    ascii85_decode,
    ascii85_encode,
    base64_decode,
    base64_encode,
    vlq_decode,
    vlq_encode,
)
from binkit.errors import InvalidCharacterError, MalformedInputError


BASE64_VECTORS = [
    ("Rm9vQmFy", [0x46, 0x6F, 0x6F, 0x42, 0x61, 0x72]),
    ("Y+Fm6WLhYuk=", [0x63, 0xE1, 0x66, 0xE9, 0x62, 0xE1, 0x62, 0xE9]),
    ("iQEAj//+AA==", [0x89, 0x01, 0x00, 0x8F, 0xFF, 0xFE, 0x00]),
    ("8J+Ygg==", [0xF0, 0x9F, 0x98, 0x82]),
    ("Y+Fm6Q==", [0x63, 0xE1, 0x66, 0xE9]),
    ("", []),
]


class TestBase64:
    """Tests for the base64 codec."""

    @pytest.mark.parametrize("encoded, raw", BASE64_VECTORS)
    def test_encode(self, encoded, raw):
        """Verify known encodings."""
        assert base64_encode(raw) == encoded

    @pytest.mark.parametrize("encoded, raw", BASE64_VECTORS)
    def test_decode(self, encoded, raw):
        """Verify known decodings."""
        assert base64_decode(encoded) == bytes(raw)

    def test_text_input_is_narrowed_per_char(self):
        """Verify str input is one byte per character, not UTF-8."""
        assert base64_encode("c\xe1f\xe9") == "Y+Fm6Q=="

    def test_decode_as_text(self):
        """Verify the Latin-1 string output form."""
        assert base64_decode("Y+Fm6Q==", as_text=True) == "c\xe1f\xe9"

    def test_decode_ignores_noise(self):
        """Verify whitespace and foreign characters are stripped."""
        assert base64_decode("Rm9v\r\nQm Fy!") == b"FooBar"

    def test_decode_without_padding(self):
        """Verify unpadded input decodes the same."""
        assert base64_decode("8J+Ygg") == bytes([0xF0, 0x9F, 0x98, 0x82])

    @pytest.mark.parametrize("encoded, raw", [
        ("QQ==QQ==", b"AA"),
        ("Rm8=Rm9v", b"FoFoo"),
        ("QQ==\nQUI=\nQUJD", b"AABABC"),
    ])
    def test_decode_concatenated_padded_blocks(self, encoded, raw):
        """Verify padding closes only its own quad."""
        assert base64_decode(encoded) == raw

    def test_decode_accepts_bytes(self):
        """Verify bytes input is read as text."""
        assert base64_decode(b"Rm9vQmFy") == b"FooBar"

    def test_matches_stdlib(self):
        """Verify agreement with the stdlib for every remainder length."""
        data = bytes(range(256))
        for size in (1, 2, 3, 100, 256):
            expected = base64.b64encode(data[:size]).decode("ascii")
            assert base64_encode(data[:size]) == expected
            assert base64_decode(expected) == data[:size]


class TestVlq:
    """Tests for base64 VLQ integers."""

    @pytest.mark.parametrize("text, values", [
        ("AAAA", [0, 0, 0, 0]),
        ("IGAM", [4, 3, 0, 6]),
        ("8Egkh9BwM8EA", [78, 1000000, 200, 78, 0]),
        ("7C", [-45]),
        ("/wT", [-9999]),
        ("h9ub", [-450000]),
        ("B", [-0x80000000]),
    ])
    def test_decode(self, text, values):
        """Verify known decodings, including negative zero."""
        assert vlq_decode(text) == values

    @pytest.mark.parametrize("value, text", [
        (0, "A"),
        (1, "C"),
        (-1, "D"),
        (0x1FFFFF, "+///D"),
        (-45, "7C"),
        (-0x80000000, "B"),
    ])
    def test_encode(self, value, text):
        """Verify known encodings."""
        assert vlq_encode(value) == text

    def test_encode_sequence(self):
        """Verify a sequence encodes as concatenated quanta."""
        assert vlq_encode([78, 1000000, 200, 78, 0]) == "8Egkh9BwM8EA"

    def test_encode_numpy_scalars(self):
        """Verify numpy integer scalars encode like ints."""
        assert vlq_encode(np.int32(-45)) == "7C"
        assert vlq_encode(np.uint8(4)) == "I"
        assert vlq_encode(np.array([4, 3, 0, 6], dtype=np.int64)) == "IGAM"

    def test_round_trip_large_values(self):
        """Verify values beyond 32 bits survive."""
        values = [2 ** 40, -(2 ** 40), 0x7FFFFFFF, -0x7FFFFFFF]
        assert vlq_decode(vlq_encode(values)) == values

    def test_bad_character(self):
        """Verify characters outside the alphabet are named."""
        with pytest.raises(InvalidCharacterError, match=r"Bad character: \?"):
            vlq_decode("AA?A")

    def test_unterminated_quantum(self):
        """Verify a trailing continuation digit is rejected."""
        with pytest.raises(MalformedInputError) as excinfo:
            vlq_decode("A8")
        assert excinfo.value.offset == 1


class TestAscii85:
    """Tests for the ASCII85 codec."""

    @pytest.mark.parametrize("text, raw", [
        ("5l", b"A"),
        ("6!=", b"AZ"),
        ("7W32", b"Foo"),
        ("7W32t", b"Foo."),
        ("9jqo^F*2M7", b"Man sure"),
        ("J=:u^", bytes([0x80, 0x9A, 0x7F, 0xF7])),
        ("z", bytes(4)),
        ("", b""),
    ])
    def test_round_trip_vectors(self, text, raw):
        """Verify known encodings in both directions."""
        assert ascii85_encode(raw) == text
        assert ascii85_decode(text) == raw

    def test_decode_delimiters_and_whitespace(self):
        """Verify <~ ~> framing and whitespace are skipped."""
        assert ascii85_decode("<~9jqo^\nF*2M7~>") == b"Man sure"

    def test_partial_zero_group_is_not_abbreviated(self):
        """Verify only full zero groups become z."""
        assert ascii85_encode(bytes(6)) == "z!!!"
        assert ascii85_decode("z!!!") == bytes(6)

    def test_unexpected_character(self):
        """Verify characters past u are rejected."""
        with pytest.raises(InvalidCharacterError, match='Unexpected character "v"'):
            ascii85_decode("9jqov")

    def test_misplaced_z(self):
        """Verify z inside a group is rejected."""
        with pytest.raises(MalformedInputError, match="Unexpected `z` shorthand"):
            ascii85_decode("5z")

    def test_group_overflow(self):
        """Verify groups above 2^32 - 1 are rejected."""
        with pytest.raises(MalformedInputError):
            ascii85_decode("uuuuu")
