"""
Data Models
===========

Pydantic models shared across binkit.

Models:
    Options:
        - ErrorMode: Substitute or raise on malformed input
        - Endianness: big, little or auto (BOM-detected)
        - Utf8Options, Utf16Options, Utf32Options: Transcoder settings

    Frame:
        - Opcode: Defined WebSocket opcodes
        - WebSocketFrame: One decoded or to-be-encoded frame
"""

from binkit.models.frame import MAX_PAYLOAD_LENGTH, Opcode, WebSocketFrame
from binkit.models.options import (
    REPLACEMENT_CHARACTER,
    Endianness,
    ErrorMode,
    Utf8Options,
    Utf16Options,
    Utf32Options,
)

__all__ = [
    # Options
    "REPLACEMENT_CHARACTER",
    "ErrorMode",
    "Endianness",
    "Utf8Options",
    "Utf16Options",
    "Utf32Options",
    # Frame
    "MAX_PAYLOAD_LENGTH",
    "Opcode",
    "WebSocketFrame",
]
