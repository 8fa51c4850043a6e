"""
Transcoder Building Blocks
==========================

Pieces shared by the UTF-8/16/32 transcoders: option resolution, the
codepoint sink that substitutes or raises, BOM-based byte order
detection and output rendering.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel

from binkit.errors import CodepointRangeError, MalformedInputError
from binkit.models.options import REPLACEMENT_CHARACTER, Endianness, ErrorMode


logger = logging.getLogger(__name__)

MAX_CODEPOINT = 0x10FFFF

OptionsT = TypeVar("OptionsT", bound=BaseModel)

TextInput = Union[str, Iterable[int]]


def resolve_options(
    options_type: Type[OptionsT],
    options: Optional[OptionsT],
    overrides: dict,
) -> OptionsT:
    """
    Merge an options object with keyword overrides.

    Args:
        options_type: Options model class
        options: Explicit options, or None for defaults
        overrides: Field values taking precedence over options

    Returns:
        Validated options instance
    """
    if options is None:
        return options_type(**overrides)
    if overrides:
        return options_type.model_validate({**options.model_dump(), **overrides})
    return options


class CodepointSink:
    """
    Collects decoded codepoints and applies the error policy.

    In REPLACE mode each malformed unit appends U+FFFD and is counted;
    in STRICT mode the first one raises MalformedInputError.
    """

    __slots__ = ("codepoints", "replaced", "_strict", "_label")

    def __init__(self, errors: ErrorMode, label: str):
        self.codepoints: List[int] = []
        self.replaced = 0
        self._strict = errors == ErrorMode.STRICT
        self._label = label

    def emit(self, codepoint: int) -> None:
        self.codepoints.append(codepoint)

    def malformed(self, offset: int) -> None:
        if self._strict:
            raise MalformedInputError(f"Invalid {self._label} at offset {offset}", offset)
        self.codepoints.append(REPLACEMENT_CHARACTER)
        self.replaced += 1

    def finish(self) -> List[int]:
        if self.replaced:
            logger.debug(
                f"Replaced {self.replaced} malformed {self._label} unit(s) with U+FFFD"
            )
        return self.codepoints


def detect_byte_order(
    raw: bytes,
    endianness: Endianness,
    bom_big: bytes,
    bom_little: bytes,
) -> Tuple[bool, int]:
    """
    Resolve the byte order and skip a matching BOM.

    Args:
        raw: Encoded bytes
        endianness: Requested byte order (AUTO detects a BOM)
        bom_big: Big-endian byte order mark
        bom_little: Little-endian byte order mark

    Returns:
        Tuple of (little_endian, offset of first code unit)
    """
    if endianness != Endianness.LITTLE and raw.startswith(bom_big):
        return False, len(bom_big)
    if endianness != Endianness.BIG and raw.startswith(bom_little):
        return True, len(bom_little)
    return endianness == Endianness.LITTLE, 0


def render(codepoints: List[int], code_points: bool, join_surrogates: bool = False):
    """
    Produce the caller's requested output form.

    Args:
        codepoints: Decoded codepoints
        code_points: Return the list itself instead of a string
        join_surrogates: Combine adjacent high/low surrogate halves into
            one character in string output

    Returns:
        list[int] or str
    """
    if code_points:
        return codepoints
    if not join_surrogates:
        return "".join(map(chr, codepoints))

    chars = []
    index = 0
    while index < len(codepoints):
        high = codepoints[index]
        if 0xD800 <= high <= 0xDBFF and index + 1 < len(codepoints):
            low = codepoints[index + 1]
            if 0xDC00 <= low <= 0xDFFF:
                chars.append(chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)))
                index += 2
                continue
        chars.append(chr(high))
        index += 1
    return "".join(chars)


def to_codepoints(data: TextInput) -> List[int]:
    """
    Normalize text or codepoints, validating the Unicode range.

    Raises:
        CodepointRangeError: If a value lies outside [0, 0x10FFFF]
    """
    if isinstance(data, str):
        return [ord(char) for char in data]

    codepoints = [int(value) for value in data]
    for codepoint in codepoints:
        if not 0 <= codepoint <= MAX_CODEPOINT:
            raise CodepointRangeError(codepoint)
    return codepoints
