"""
SHA-1 Digest
============

FIPS 180-1 SHA-1 over a complete byte sequence.

The message is padded with a single 1 bit, zeros up to 56 mod 64 bytes,
and the 64-bit big-endian bit length. Each 64-byte block is expanded to
80 words and run through four groups of 20 rounds.

Note:
    SHA-1 is provided for protocol compatibility (WebSocket handshakes,
    content fingerprints), not for security.
"""

from typing import List

from binkit.byteseq import ByteInput, to_bytes
from binkit.numeric.bits import WORD_MASK, rotl
from binkit.numeric.integers import bytes_to_uint32, uint32_to_bytes, uint64_to_bytes


INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def _pad(message: bytes) -> bytes:
    padded = bytearray(message)
    padded.append(0x80)
    padded.extend(b"\x00" * ((56 - len(padded) % 64) % 64))
    padded.extend(uint64_to_bytes(len(message) * 8))
    return bytes(padded)


def _compress(state: List[int], block: bytes) -> List[int]:
    w = bytes_to_uint32(block).tolist()
    for t in range(16, 80):
        w.append(rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

    a, b, c, d, e = state
    for t in range(80):
        if t < 20:
            f = (b & c) | (~b & d)
        elif t < 40 or t >= 60:
            f = b ^ c ^ d
        else:
            f = (b & c) | (b & d) | (c & d)

        temp = (rotl(a, 5) + f + e + ROUND_CONSTANTS[t // 20] + w[t]) & WORD_MASK
        e, d, c, b, a = d, c, rotl(b, 30), a, temp

    return [(x + y) & WORD_MASK for x, y in zip(state, (a, b, c, d, e))]


def sha1_digest(data: ByteInput) -> bytes:
    """
    Compute the raw 20-byte SHA-1 digest.

    Args:
        data: Byte sequence in any accepted form

    Returns:
        The digest as bytes
    """
    message = _pad(to_bytes(data))
    state = list(INITIAL_STATE)
    for offset in range(0, len(message), 64):
        state = _compress(state, message[offset:offset + 64])
    return uint32_to_bytes(state)


def sha1(data: ByteInput) -> str:
    """
    Compute the SHA-1 digest as 40 lowercase hex characters.

    Example:
        >>> sha1(b"")
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    return sha1_digest(data).hex()
