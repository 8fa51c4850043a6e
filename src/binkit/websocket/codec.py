"""
WebSocket Frame Codec
=====================

RFC 6455 frame encoding and decoding over byte sequences. No sockets
are involved; callers feed and collect raw bytes.

Wire Layout:
    byte 0:  FIN | RSV1 | RSV2 | RSV3 | opcode(4)
    byte 1:  MASK | length(7)
    length 126 -> 16-bit big-endian extended length follows
    length 127 -> 64-bit big-endian extended length follows
    MASK set   -> 4-byte masking key follows
    payload, XOR-ed with the key bytes cycled

Design Rules:
    - Encoding always picks the shortest length form
    - A payload shorter than its declared length is returned as-is,
      keeping the declared length; only a truncated header is an error
"""

import logging

import numpy as np

from binkit.byteseq import ByteInput, to_bytes
from binkit.errors import MalformedInputError, PayloadTooLargeError
from binkit.models.frame import MAX_PAYLOAD_LENGTH, WebSocketFrame
from binkit.numeric.integers import (
    bytes_to_uint16,
    bytes_to_uint32,
    bytes_to_uint64,
    uint16_to_bytes,
    uint32_to_bytes,
    uint64_to_bytes,
)


logger = logging.getLogger(__name__)

FIN_BIT = 0x80
RSV1_BIT = 0x40
RSV2_BIT = 0x20
RSV3_BIT = 0x10
OPCODE_MASK = 0x0F
MASK_BIT = 0x80
LENGTH_MASK = 0x7F

LENGTH_16_MARKER = 126
LENGTH_64_MARKER = 127


def apply_mask(payload: ByteInput, mask: int) -> bytes:
    """
    XOR a payload with a 32-bit masking key.

    The key's big-endian bytes are cycled over the payload. Applying the
    same key twice restores the original bytes.

    Args:
        payload: Payload bytes
        mask: 32-bit masking key

    Returns:
        Masked (or unmasked) payload
    """
    data = np.frombuffer(to_bytes(payload), dtype=np.uint8)
    key = np.frombuffer(uint32_to_bytes(mask), dtype=np.uint8)
    return (data ^ np.resize(key, data.size)).tobytes()


def encode_payload_length(length: int, masked: bool = False) -> bytes:
    """
    Encode the MASK bit and payload length field.

    Args:
        length: Payload byte count
        masked: Set the MASK bit

    Returns:
        1, 3 or 9 header bytes

    Raises:
        PayloadTooLargeError: If length exceeds 2^64 - 1
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"Payload length must be non-negative, got {length}")
    if length > MAX_PAYLOAD_LENGTH:
        raise PayloadTooLargeError("Payload too large")

    mask_bit = MASK_BIT if masked else 0
    if length < LENGTH_16_MARKER:
        return bytes([mask_bit | length])
    if length <= 0xFFFF:
        return bytes([mask_bit | LENGTH_16_MARKER]) + uint16_to_bytes(length)
    return bytes([mask_bit | LENGTH_64_MARKER]) + uint64_to_bytes(length)


def encode_frame(frame: WebSocketFrame, no_mask: bool = False) -> bytes:
    """
    Serialize a frame to wire bytes.

    Args:
        frame: Frame to encode; its declared length is ignored in favour
            of len(frame.payload)
        no_mask: Treat the payload as already masked and copy it as-is

    Returns:
        Encoded frame bytes

    Raises:
        PayloadTooLargeError: If the payload exceeds 2^64 - 1 bytes
    """
    first = (
        (FIN_BIT if frame.is_final else 0)
        | (RSV1_BIT if frame.is_rsv1 else 0)
        | (RSV2_BIT if frame.is_rsv2 else 0)
        | (RSV3_BIT if frame.is_rsv3 else 0)
        | (frame.opcode & OPCODE_MASK)
    )
    header = bytes([first]) + encode_payload_length(len(frame.payload), frame.is_masked)

    payload = frame.payload
    if frame.mask is not None:
        header += uint32_to_bytes(frame.mask)
        if not no_mask:
            payload = apply_mask(payload, frame.mask)

    return header + payload


def _require(raw: bytes, end: int) -> None:
    if len(raw) < end:
        raise MalformedInputError(
            f"Truncated WebSocket frame header at offset {len(raw)}", len(raw)
        )


def decode_frame(data: ByteInput, no_mask: bool = False) -> WebSocketFrame:
    """
    Parse one frame from wire bytes.

    Args:
        data: Bytes beginning with a frame header
        no_mask: Leave a masked payload masked

    Returns:
        WebSocketFrame; bytes past the frame are kept in its trailer

    Raises:
        MalformedInputError: If the header itself is incomplete
    """
    raw = to_bytes(data)
    _require(raw, 2)
    first, second = raw[0], raw[1]

    offset = 2
    length = second & LENGTH_MASK
    if length == LENGTH_16_MARKER:
        _require(raw, 4)
        length = int(bytes_to_uint16(raw[2:4])[0])
        offset = 4
    elif length == LENGTH_64_MARKER:
        _require(raw, 10)
        length = int(bytes_to_uint64(raw[2:10])[0])
        offset = 10

    mask = None
    if second & MASK_BIT:
        _require(raw, offset + 4)
        mask = int(bytes_to_uint32(raw[offset:offset + 4])[0])
        offset += 4

    end = offset + length
    payload = raw[offset:end]
    if len(payload) < length:
        logger.debug(
            f"Frame declares {length} payload bytes, only {len(payload)} available"
        )
    if mask is not None and not no_mask:
        payload = apply_mask(payload, mask)

    return WebSocketFrame(
        is_final=bool(first & FIN_BIT),
        is_rsv1=bool(first & RSV1_BIT),
        is_rsv2=bool(first & RSV2_BIT),
        is_rsv3=bool(first & RSV3_BIT),
        opcode=first & OPCODE_MASK,
        length=length,
        mask=mask,
        payload=payload,
        trailer=raw[end:],
    )
