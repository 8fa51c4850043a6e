"""
binkit
======

Bit-exact binary codecs over plain byte sequences.

This package provides base64 (with VLQ and ASCII85 variants), CRC-32,
Adler-32, SHA-1, fixed-width integer and IEEE-754 float conversions,
UTF-8/16/32 transcoding with strict validation modes, a minimal PNG
generator, and RFC 6455 WebSocket frame encoding and decoding.

Components:
    - checksum: Adler-32, CRC-32, SHA-1
    - encoding: base64, base64 VLQ, ASCII85
    - numeric: Integer/float byte conversions and 32-bit rotations
    - unicode: UTF-8/16/32 transcoders
    - image: Solid-colour PNG generator
    - websocket: Frame codec and handshake helper

Example:
    from binkit import crc32, sha1, utf8_encode

    crc32(b"Foo123")                 # 0x67EDF5DB
    sha1(b"xyz")                     # '66b27417d37e024c46526c2f6d358a754fc552f3'
    utf8_encode(b"\\xc0\\x80")        # '\\ufffd\\ufffd'
"""

__version__ = "0.1.0"

from binkit.checksum import adler32, crc32, sha1, sha1_digest
from binkit.encoding import (
    ascii85_decode,
    ascii85_encode,
    base64_decode,
    base64_encode,
    vlq_decode,
    vlq_encode,
)
from binkit.errors import (
    CodecError,
    CodepointRangeError,
    InvalidCharacterError,
    MalformedInputError,
    PayloadTooLargeError,
)
from binkit.image import rgba, rgba_base64
from binkit.models import (
    Endianness,
    ErrorMode,
    Opcode,
    Utf8Options,
    Utf16Options,
    Utf32Options,
    WebSocketFrame,
)
from binkit.numeric import (
    bytes_to_float32,
    bytes_to_float64,
    bytes_to_int8,
    bytes_to_int16,
    bytes_to_int32,
    bytes_to_int64,
    bytes_to_uint8,
    bytes_to_uint16,
    bytes_to_uint32,
    bytes_to_uint64,
    float32_to_bytes,
    float64_to_bytes,
    int8_to_bytes,
    int16_to_bytes,
    int32_to_bytes,
    int64_to_bytes,
    rotl,
    rotr,
    uint8_to_bytes,
    uint16_to_bytes,
    uint32_to_bytes,
    uint64_to_bytes,
)
from binkit.unicode import (
    utf8_decode,
    utf8_encode,
    utf16_decode,
    utf16_encode,
    utf32_decode,
    utf32_encode,
)
from binkit.websocket import (
    apply_mask,
    decode_frame,
    encode_frame,
    encode_payload_length,
    ws_handshake,
)

__all__ = [
    "__version__",
    # Checksums
    "adler32",
    "crc32",
    "sha1",
    "sha1_digest",
    # Encodings
    "base64_encode",
    "base64_decode",
    "vlq_encode",
    "vlq_decode",
    "ascii85_encode",
    "ascii85_decode",
    # Numeric
    "bytes_to_int8",
    "bytes_to_uint8",
    "bytes_to_int16",
    "bytes_to_uint16",
    "bytes_to_int32",
    "bytes_to_uint32",
    "bytes_to_int64",
    "bytes_to_uint64",
    "int8_to_bytes",
    "uint8_to_bytes",
    "int16_to_bytes",
    "uint16_to_bytes",
    "int32_to_bytes",
    "uint32_to_bytes",
    "int64_to_bytes",
    "uint64_to_bytes",
    "bytes_to_float32",
    "bytes_to_float64",
    "float32_to_bytes",
    "float64_to_bytes",
    "rotl",
    "rotr",
    # Unicode
    "utf8_encode",
    "utf8_decode",
    "utf16_encode",
    "utf16_decode",
    "utf32_encode",
    "utf32_decode",
    # Image
    "rgba",
    "rgba_base64",
    # WebSocket
    "decode_frame",
    "encode_frame",
    "encode_payload_length",
    "apply_mask",
    "ws_handshake",
    # Models
    "ErrorMode",
    "Endianness",
    "Utf8Options",
    "Utf16Options",
    "Utf32Options",
    "Opcode",
    "WebSocketFrame",
    # Errors
    "CodecError",
    "MalformedInputError",
    "CodepointRangeError",
    "PayloadTooLargeError",
    "InvalidCharacterError",
]
