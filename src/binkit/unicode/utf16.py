"""
UTF-16 Transcoder
=================

UTF-16 in both directions, big- or little-endian.

    utf16_encode: UTF-16 bytes -> text (or codepoints)
    utf16_decode: text (or codepoints) -> UTF-16 bytes

Design Rules:
    - Endianness AUTO honours a leading BOM and falls back to big-endian
    - A BOM matching the selected byte order is consumed
    - High/low surrogate pairs are combined into one codepoint
    - Unpaired surrogates become U+FFFD unless allow_unpaired is set
    - A trailing odd byte is one malformed unit; if it follows a
      dangling high surrogate, both collapse into a single U+FFFD
"""

from typing import List, Optional, Union

from binkit.byteseq import ByteInput, to_bytes
from binkit.models.options import Utf16Options
from binkit.numeric.integers import bytes_to_uint16, uint16_to_bytes
from binkit.unicode.base import (
    CodepointSink,
    TextInput,
    detect_byte_order,
    render,
    resolve_options,
    to_codepoints,
)


BOM_BIG_ENDIAN = b"\xfe\xff"
BOM_LITTLE_ENDIAN = b"\xff\xfe"


def _is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def _is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def utf16_encode(
    data: ByteInput,
    options: Optional[Utf16Options] = None,
    **overrides,
) -> Union[str, List[int]]:
    """
    Read UTF-16 bytes as text.

    Args:
        data: UTF-16 byte sequence
        options: Decoding options; defaults to lenient, BOM-detected
        **overrides: Individual Utf16Options fields

    Returns:
        Decoded string, or list of codepoints if options.code_points

    Raises:
        MalformedInputError: On the first malformed unit in strict mode
    """
    options = resolve_options(Utf16Options, options, overrides)
    raw = to_bytes(data)
    sink = CodepointSink(options.errors, "UTF-16")

    little_endian, start = detect_byte_order(
        raw, options.endianness, BOM_BIG_ENDIAN, BOM_LITTLE_ENDIAN
    )
    body = raw[start:]
    usable = len(body) - len(body) % 2
    units = bytes_to_uint16(body[:usable], little_endian).tolist()

    def unpaired(unit: int, offset: int) -> None:
        if options.allow_unpaired:
            sink.emit(unit)
        else:
            sink.malformed(offset)

    pending = None
    pending_offset = 0
    for position, unit in enumerate(units):
        offset = start + 2 * position
        if pending is not None:
            if _is_low_surrogate(unit):
                sink.emit(0x10000 + ((pending - 0xD800) << 10) + (unit - 0xDC00))
                pending = None
                continue
            unpaired(pending, pending_offset)
            pending = None

        if _is_high_surrogate(unit):
            pending, pending_offset = unit, offset
        elif _is_low_surrogate(unit):
            unpaired(unit, offset)
        else:
            sink.emit(unit)

    if len(body) % 2:
        if pending is not None and not options.allow_unpaired:
            sink.malformed(pending_offset)
        else:
            if pending is not None:
                sink.emit(pending)
            sink.malformed(start + usable)
    elif pending is not None:
        unpaired(pending, pending_offset)

    return render(sink.finish(), options.code_points)


def utf16_decode(
    data: TextInput,
    little_endian: bool = False,
    add_bom: bool = False,
) -> bytes:
    """
    Write text or codepoints as UTF-16 bytes.

    Codepoints above U+FFFF become surrogate pairs; lone surrogate
    codepoints are written unchanged.

    Args:
        data: String or iterable of codepoints
        little_endian: Write code units least significant byte first
        add_bom: Prefix a byte order mark

    Returns:
        Encoded bytes

    Raises:
        CodepointRangeError: If a codepoint is outside [0, 0x10FFFF]
    """
    units = [0xFEFF] if add_bom else []
    for codepoint in to_codepoints(data):
        if codepoint >= 0x10000:
            codepoint -= 0x10000
            units.append(0xD800 | codepoint >> 10)
            units.append(0xDC00 | codepoint & 0x3FF)
        else:
            units.append(codepoint)
    return uint16_to_bytes(units, little_endian)
