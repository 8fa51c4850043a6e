"""
WebSocket Handshake
===================

Computes the Sec-WebSocket-Accept value a server returns for a client's
Sec-WebSocket-Key (RFC 6455 section 4.2.2).
"""

from binkit.checksum.sha1 import sha1_digest
from binkit.encoding.base64_codec import base64_encode
from binkit.unicode.utf8 import utf8_decode


WEBSOCKET_GUID = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"


def ws_handshake(key: str) -> str:
    """
    Derive the Sec-WebSocket-Accept header value.

    Args:
        key: Client's Sec-WebSocket-Key header value

    Returns:
        base64(SHA-1(key + GUID))

    Example:
        >>> ws_handshake("dGhlIHNhbXBsZSBub25jZQ==")
        's3pPLMBiTxaQ9kYGzzhZRbK+xOo='
    """
    return base64_encode(sha1_digest(utf8_decode(key + WEBSOCKET_GUID)))
