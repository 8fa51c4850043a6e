"""
Unicode Transcoders
===================

UTF-8, UTF-16 and UTF-32 transcoding with lenient (U+FFFD) and strict
validation modes.

Direction convention:
    *_encode: encoded bytes -> text or codepoints
    *_decode: text or codepoints -> encoded bytes
"""

from binkit.unicode.utf8 import utf8_decode, utf8_encode
from binkit.unicode.utf16 import utf16_decode, utf16_encode
from binkit.unicode.utf32 import utf32_decode, utf32_encode

__all__ = [
    "utf8_encode",
    "utf8_decode",
    "utf16_encode",
    "utf16_decode",
    "utf32_encode",
    "utf32_decode",
]
