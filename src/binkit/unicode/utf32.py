"""
UTF-32 Transcoder
=================

UTF-32 in both directions, big- or little-endian.

    utf32_encode: UTF-32 bytes -> text (or codepoints)
    utf32_decode: text (or codepoints) -> UTF-32 bytes

Units above U+10FFFF, surrogate codepoints (unless allowed) and an
incomplete trailing unit are malformed.
"""

from typing import List, Optional, Union

from binkit.byteseq import ByteInput, to_bytes
from binkit.models.options import Utf32Options
from binkit.numeric.integers import bytes_to_uint32, uint32_to_bytes
from binkit.unicode.base import (
    MAX_CODEPOINT,
    CodepointSink,
    TextInput,
    detect_byte_order,
    render,
    resolve_options,
    to_codepoints,
)


BOM_BIG_ENDIAN = b"\x00\x00\xfe\xff"
BOM_LITTLE_ENDIAN = b"\xff\xfe\x00\x00"


def utf32_encode(
    data: ByteInput,
    options: Optional[Utf32Options] = None,
    **overrides,
) -> Union[str, List[int]]:
    """
    Read UTF-32 bytes as text.

    Args:
        data: UTF-32 byte sequence
        options: Decoding options; defaults to lenient, BOM-detected
        **overrides: Individual Utf32Options fields

    Returns:
        Decoded string, or list of codepoints if options.code_points

    Raises:
        MalformedInputError: On the first malformed unit in strict mode
    """
    options = resolve_options(Utf32Options, options, overrides)
    raw = to_bytes(data)
    sink = CodepointSink(options.errors, "UTF-32")

    little_endian, start = detect_byte_order(
        raw, options.endianness, BOM_BIG_ENDIAN, BOM_LITTLE_ENDIAN
    )
    body = raw[start:]
    usable = len(body) - len(body) % 4

    for position, unit in enumerate(bytes_to_uint32(body[:usable], little_endian).tolist()):
        is_surrogate = 0xD800 <= unit <= 0xDFFF
        if unit > MAX_CODEPOINT or (is_surrogate and not options.allow_surrogates):
            sink.malformed(start + 4 * position)
        else:
            sink.emit(unit)

    if len(body) % 4:
        sink.malformed(start + usable)

    return render(sink.finish(), options.code_points)


def utf32_decode(
    data: TextInput,
    little_endian: bool = False,
    add_bom: bool = False,
) -> bytes:
    """
    Write text or codepoints as UTF-32 bytes.

    Raises:
        CodepointRangeError: If a codepoint is outside [0, 0x10FFFF]
    """
    units = [0xFEFF] if add_bom else []
    units.extend(to_codepoints(data))
    return uint32_to_bytes(units, little_endian)
