"""
Checksums and Digests
=====================

Adler-32, CRC-32 and SHA-1 over complete byte sequences.
"""

from binkit.checksum.adler32 import adler32
from binkit.checksum.crc32 import crc32
from binkit.checksum.sha1 import sha1, sha1_digest

__all__ = [
    "adler32",
    "crc32",
    "sha1",
    "sha1_digest",
]
