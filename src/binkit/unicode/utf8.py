"""
UTF-8 Transcoder
================

RFC 3629 UTF-8 in both directions.

Naming follows the byte-level view used across binkit:
    utf8_encode: UTF-8 bytes -> text (or codepoints)
    utf8_decode: text (or codepoints) -> UTF-8 bytes

Validation Rules:
    - Lead bytes C0, C1 and F5..FF are never valid
    - E0 requires a second byte in A0..BF, F0 in 90..BF (no overlongs)
    - ED requires a second byte in 80..9F (no surrogate halves)
    - A completed sequence naming a surrogate half is malformed unless
      allow_surrogates is set, overlong 4-byte spellings included
    - F4 requires a second byte in 80..8F (nothing above U+10FFFF)
    - The byte that breaks a sequence is re-read as a new lead, so each
      maximal malformed subpart yields exactly one U+FFFD

Example:
    >>> utf8_encode(bytes([0xC2, 0x45]))
    '\\ufffdE'
    >>> utf8_encode(bytes([0xC0, 0x80]), allow_overlong=True)
    '\\x00'
"""

from typing import List, Optional, Union

from binkit.byteseq import ByteInput, to_bytes
from binkit.models.options import Utf8Options
from binkit.unicode.base import (
    CodepointSink,
    TextInput,
    render,
    resolve_options,
    to_codepoints,
)


BYTE_ORDER_MARK = 0xFEFF


def utf8_encode(
    data: ByteInput,
    options: Optional[Utf8Options] = None,
    **overrides,
) -> Union[str, List[int]]:
    """
    Read UTF-8 bytes as text.

    Args:
        data: UTF-8 byte sequence
        options: Decoding options; defaults to lenient replacement
        **overrides: Individual Utf8Options fields

    Returns:
        Decoded string, or list of codepoints if options.code_points

    Raises:
        MalformedInputError: On the first malformed sequence in strict mode
    """
    options = resolve_options(Utf8Options, options, overrides)
    raw = to_bytes(data)
    sink = CodepointSink(options.errors, "UTF-8")

    needed = 0
    seen = 0
    codepoint = 0
    lower, upper = 0x80, 0xBF
    start = 0
    index = 0
    while index < len(raw):
        byte = raw[index]

        if needed == 0:
            start = index
            index += 1
            if byte < 0x80:
                sink.emit(byte)
            elif 0xC2 <= byte <= 0xDF or (options.allow_overlong and byte in (0xC0, 0xC1)):
                needed, codepoint = 1, byte & 0x1F
            elif 0xE0 <= byte <= 0xEF:
                if byte == 0xE0 and not options.allow_overlong:
                    lower = 0xA0
                elif byte == 0xED and not options.allow_surrogates:
                    upper = 0x9F
                needed, codepoint = 2, byte & 0x0F
            elif 0xF0 <= byte <= 0xF4:
                if byte == 0xF0 and not options.allow_overlong:
                    lower = 0x90
                elif byte == 0xF4:
                    upper = 0x8F
                needed, codepoint = 3, byte & 0x07
            else:
                sink.malformed(start)
            continue

        if not lower <= byte <= upper:
            # Re-read this byte as a lead on the next pass
            needed = seen = 0
            lower, upper = 0x80, 0xBF
            sink.malformed(start)
            continue

        lower, upper = 0x80, 0xBF
        codepoint = (codepoint << 6) | (byte & 0x3F)
        seen += 1
        index += 1
        if seen == needed:
            if 0xD800 <= codepoint <= 0xDFFF and not options.allow_surrogates:
                # Overlong F0 forms can still spell a surrogate half
                sink.malformed(start)
            else:
                sink.emit(codepoint)
            needed = seen = 0

    if needed:
        sink.malformed(start)

    codepoints = sink.finish()
    if options.strip_bom and codepoints and codepoints[0] == BYTE_ORDER_MARK:
        del codepoints[0]
    return render(codepoints, options.code_points, join_surrogates=options.allow_surrogates)


def utf8_decode(data: TextInput) -> bytes:
    """
    Write text or codepoints as UTF-8 bytes.

    Surrogate codepoints are written as 3-byte sequences.

    Args:
        data: String or iterable of codepoints

    Returns:
        Minimal-length UTF-8 bytes

    Raises:
        CodepointRangeError: If a codepoint is outside [0, 0x10FFFF]
    """
    encoded = bytearray()
    for codepoint in to_codepoints(data):
        if codepoint < 0x80:
            encoded.append(codepoint)
        elif codepoint < 0x800:
            encoded += bytes((0xC0 | codepoint >> 6, 0x80 | codepoint & 0x3F))
        elif codepoint < 0x10000:
            encoded += bytes((
                0xE0 | codepoint >> 12,
                0x80 | codepoint >> 6 & 0x3F,
                0x80 | codepoint & 0x3F,
            ))
        else:
            encoded += bytes((
                0xF0 | codepoint >> 18,
                0x80 | codepoint >> 12 & 0x3F,
                0x80 | codepoint >> 6 & 0x3F,
                0x80 | codepoint & 0x3F,
            ))
    return bytes(encoded)
