"""
Text Encodings
==============

Base64, base64 VLQ and ASCII85 codecs.
"""

from binkit.encoding.ascii85 import ascii85_decode, ascii85_encode
from binkit.encoding.base64_codec import base64_decode, base64_encode
from binkit.encoding.vlq import vlq_decode, vlq_encode

__all__ = [
    "base64_encode",
    "base64_decode",
    "vlq_encode",
    "vlq_decode",
    "ascii85_encode",
    "ascii85_decode",
]
