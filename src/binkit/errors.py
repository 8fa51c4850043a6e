"""
Codec Errors
============

Exception hierarchy shared by every codec in binkit.

Design Rules:
    - Checksums and byte conversions never raise
    - Lenient decoders substitute U+FFFD instead of raising
    - Strict decoders raise MalformedInputError with the byte offset
    - Every error also derives from the matching builtin so callers can
      catch ValueError / OverflowError without importing binkit
"""

from typing import Optional


class CodecError(Exception):
    """Base class for all binkit codec failures."""
    pass


class MalformedInputError(CodecError, ValueError):
    """
    Raised when input violates its format in strict mode.

    Attributes:
        offset: Byte offset of the offending unit, when known
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class CodepointRangeError(CodecError, ValueError):
    """Raised when a codepoint lies outside [0, 0x10FFFF]."""

    def __init__(self, codepoint: int):
        super().__init__(f"Invalid codepoint: {codepoint}")
        self.codepoint = codepoint


class PayloadTooLargeError(CodecError, OverflowError):
    """Raised when a WebSocket payload length exceeds 2^64 - 1."""
    pass


class InvalidCharacterError(CodecError, ValueError):
    """
    Raised when a text codec meets a character outside its alphabet.

    Attributes:
        character: The rejected character
    """

    def __init__(self, message: str, character: str):
        super().__init__(message)
        self.character = character
