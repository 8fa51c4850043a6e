"""
WebSocket Framing
=================

Byte-level RFC 6455 frame codec and handshake helper. No networking.
"""

from binkit.websocket.codec import apply_mask, decode_frame, encode_frame, encode_payload_length
from binkit.websocket.handshake import WEBSOCKET_GUID, ws_handshake

__all__ = [
    "decode_frame",
    "encode_frame",
    "encode_payload_length",
    "apply_mask",
    "ws_handshake",
    "WEBSOCKET_GUID",
]
