"""
WebSocket Frame Model
=====================

Pydantic model of a single RFC 6455 frame as seen by the framer.

This module defines the typed frame used as the interface between the
byte-level codec and callers. It carries no I/O behaviour.

Design Rules:
    - length is the length declared on the wire; the encoder always
      writes len(payload) instead
    - mask is None for unmasked frames, else the 32-bit masking key
    - trailer holds any bytes that followed the frame in the decoded input
"""

from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from binkit.byteseq import to_bytes


MAX_PAYLOAD_LENGTH = 2 ** 64 - 1


class Opcode(IntEnum):
    """Defined WebSocket opcodes."""

    CONTINUE = 0
    TEXT = 1
    BINARY = 2
    CLOSE = 8
    PING = 9
    PONG = 10


class WebSocketFrame(BaseModel):
    """
    One WebSocket frame.

    Attributes:
        is_final: FIN bit
        is_rsv1: RSV1 bit
        is_rsv2: RSV2 bit
        is_rsv3: RSV3 bit
        opcode: 4-bit opcode
        length: Declared payload length (defaults to len(payload))
        mask: 32-bit masking key, or None when unmasked
        payload: Payload bytes (unmasked unless decoded with no_mask)
        trailer: Bytes following the frame in the decoded input
    """

    is_final: bool = Field(default=True, description="FIN bit")
    is_rsv1: bool = Field(default=False, description="RSV1 bit")
    is_rsv2: bool = Field(default=False, description="RSV2 bit")
    is_rsv3: bool = Field(default=False, description="RSV3 bit")
    opcode: int = Field(default=Opcode.TEXT.value, ge=0, le=15, description="Frame opcode")
    length: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_PAYLOAD_LENGTH,
        description="Payload length declared in the header",
    )
    mask: Optional[int] = Field(
        default=None,
        ge=0,
        le=0xFFFFFFFF,
        description="Masking key",
    )
    payload: bytes = Field(default=b"", description="Payload bytes")
    trailer: bytes = Field(default=b"", description="Bytes after the frame")

    @field_validator("payload", "trailer", mode="before")
    @classmethod
    def _coerce_bytes(cls, value: Any) -> bytes:
        return to_bytes(value)

    def model_post_init(self, __context: Any) -> None:
        if self.length is None:
            self.length = len(self.payload)

    @property
    def opname(self) -> str:
        """Symbolic opcode name, "reserved" for undefined opcodes."""
        try:
            return Opcode(self.opcode).name.lower()
        except ValueError:
            return "reserved"

    @property
    def is_masked(self) -> bool:
        return self.mask is not None

    def to_dict(self) -> dict:
        """Export as a JSON-safe dictionary, bytes rendered as hex."""
        return {
            "is_final": self.is_final,
            "is_rsv1": self.is_rsv1,
            "is_rsv2": self.is_rsv2,
            "is_rsv3": self.is_rsv3,
            "opcode": self.opcode,
            "opname": self.opname,
            "length": self.length,
            "mask": self.mask,
            "payload": self.payload.hex(),
            "trailer": self.trailer.hex(),
        }

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full payload."""
        mask = "none" if self.mask is None else f"0x{self.mask:08X}"
        return (
            f"WebSocketFrame(opname={self.opname}, "
            f"final={self.is_final}, "
            f"length={self.length}, "
            f"mask={mask}, "
            f"payload={len(self.payload)}B)"
        )
