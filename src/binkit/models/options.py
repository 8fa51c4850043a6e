"""
Transcoder Options
==================

Pydantic models selecting validation and output behaviour of the
Unicode transcoders.

Design Rules:
    - Substitution vs. rejection is an explicit ErrorMode, never implied
      by exception handling
    - Defaults are lenient: malformed units become U+FFFD
"""

from enum import Enum

from pydantic import BaseModel, Field


REPLACEMENT_CHARACTER = 0xFFFD


class ErrorMode(str, Enum):
    """How a decoder reacts to malformed input."""

    REPLACE = "replace"
    STRICT = "strict"


class Endianness(str, Enum):
    """Byte order of UTF-16 / UTF-32 code units."""

    BIG = "big"
    LITTLE = "little"
    AUTO = "auto"


class Utf8Options(BaseModel):
    """Options for reading UTF-8 bytes."""

    errors: ErrorMode = Field(
        default=ErrorMode.REPLACE,
        description="Substitute U+FFFD or raise on malformed input",
    )
    allow_overlong: bool = Field(
        default=False,
        description="Accept non-minimal (overlong) sequences",
    )
    allow_surrogates: bool = Field(
        default=False,
        description="Accept encoded UTF-16 surrogate halves (CESU-8)",
    )
    strip_bom: bool = Field(default=False, description="Drop one leading U+FEFF")
    code_points: bool = Field(
        default=False,
        description="Return a list of codepoints instead of a string",
    )


class Utf16Options(BaseModel):
    """Options for reading UTF-16 bytes."""

    errors: ErrorMode = Field(default=ErrorMode.REPLACE)
    endianness: Endianness = Field(
        default=Endianness.AUTO,
        description="Code unit byte order; auto detects a BOM, else big",
    )
    allow_unpaired: bool = Field(
        default=False,
        description="Keep unpaired surrogates instead of substituting",
    )
    code_points: bool = Field(default=False)


class Utf32Options(BaseModel):
    """Options for reading UTF-32 bytes."""

    errors: ErrorMode = Field(default=ErrorMode.REPLACE)
    endianness: Endianness = Field(default=Endianness.AUTO)
    allow_surrogates: bool = Field(
        default=False,
        description="Keep surrogate codepoints instead of substituting",
    )
    code_points: bool = Field(default=False)
