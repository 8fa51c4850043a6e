"""
binkit Command Line
===================

Shell access to the binkit codecs.

Usage:
    binkit base64-encode photo.png
    binkit base64-decode encoded.txt -o photo.png
    binkit crc32 archive.bin
    binkit sha1 - < message.txt
    binkit png 255 0 0 255 -o red.png
    binkit vlq-encode 4 3 0 6
    binkit vlq-decode IGAM
    binkit transcode --from utf-16 --strict notes.txt
    binkit ws-accept dGhlIHNhbXBsZSBub25jZQ==
    binkit ws-decode --hex frame.hex

Inputs default to stdin ("-"). Binary outputs go to stdout unless -o is
given. Transcoder and frame-decoding defaults come from binkit.yaml and
BINKIT_* environment variables (see binkit.config).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from binkit import __version__
from binkit.checksum import adler32, crc32, sha1
from binkit.config import Settings, load_config, setup_logging
from binkit.encoding import base64_decode, base64_encode, vlq_decode, vlq_encode
from binkit.errors import CodecError
from binkit.image import rgba
from binkit.models.options import Endianness, ErrorMode
from binkit.unicode import utf8_decode, utf8_encode, utf16_encode, utf32_encode
from binkit.websocket import decode_frame, ws_handshake


logger = logging.getLogger(__name__)


# =============================================================================
# I/O Helpers
# =============================================================================

def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(data: bytes, path: Optional[str]) -> None:
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return
    with open(path, "wb") as f:
        f.write(data)
    logger.info(f"Wrote {len(data)} bytes to {path}")


# =============================================================================
# Commands
# =============================================================================

def _cmd_base64_encode(args: argparse.Namespace, settings: Settings) -> int:
    print(base64_encode(_read_input(args.input)))
    return 0


def _cmd_base64_decode(args: argparse.Namespace, settings: Settings) -> int:
    _write_output(base64_decode(_read_input(args.input)), args.output)
    return 0


def _cmd_checksum(args: argparse.Namespace, settings: Settings) -> int:
    data = _read_input(args.input)
    if args.command == "sha1":
        print(sha1(data))
    elif args.command == "crc32":
        print(f"{crc32(data):08x}")
    else:
        print(f"{adler32(data):08x}")
    return 0


def _cmd_png(args: argparse.Namespace, settings: Settings) -> int:
    png = rgba(args.red, args.green, args.blue, args.alpha)
    if args.base64:
        print(base64_encode(png))
    else:
        _write_output(png, args.output)
    return 0


def _cmd_vlq_encode(args: argparse.Namespace, settings: Settings) -> int:
    print(vlq_encode(args.values))
    return 0


def _cmd_vlq_decode(args: argparse.Namespace, settings: Settings) -> int:
    print(" ".join(str(value) for value in vlq_decode(args.text)))
    return 0


def _cmd_transcode(args: argparse.Namespace, settings: Settings) -> int:
    overrides = {"code_points": args.code_points}
    if args.strict:
        overrides["errors"] = ErrorMode.STRICT

    data = _read_input(args.input)
    if args.source == "utf-8":
        if args.strip_bom:
            overrides["strip_bom"] = True
        result = utf8_encode(data, settings.unicode.utf8_options(**overrides))
    else:
        if args.endianness:
            overrides["endianness"] = Endianness(args.endianness)
        if args.source == "utf-16":
            result = utf16_encode(data, settings.unicode.utf16_options(**overrides))
        else:
            result = utf32_encode(data, settings.unicode.utf32_options(**overrides))

    if args.code_points:
        print(" ".join(f"U+{codepoint:04X}" for codepoint in result))
    else:
        _write_output(utf8_decode(result), args.output)
    return 0


def _cmd_ws_accept(args: argparse.Namespace, settings: Settings) -> int:
    print(ws_handshake(args.key))
    return 0


def _cmd_ws_decode(args: argparse.Namespace, settings: Settings) -> int:
    data = _read_input(args.input)
    if args.hex:
        data = bytes.fromhex(data.decode("ascii"))

    unmask = settings.websocket.unmask and not args.keep_mask
    frame = decode_frame(data, no_mask=not unmask)
    logger.info(f"Decoded {frame!r}")
    print(json.dumps(frame.to_dict(), indent=2))
    return 0


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per codec."""
    parser = argparse.ArgumentParser(
        prog="binkit",
        description="Bit-exact binary codecs",
    )
    parser.add_argument("--version", action="version", version=f"binkit {__version__}")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: $BINKIT_CONFIG or ./binkit.yaml)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sub = commands.add_parser("base64-encode", help="Encode bytes as base64")
    sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    sub.set_defaults(handler=_cmd_base64_encode)

    sub = commands.add_parser("base64-decode", help="Decode base64 text")
    sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    sub.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    sub.set_defaults(handler=_cmd_base64_decode)

    for name, description in (
        ("crc32", "CRC-32 as 8 hex digits"),
        ("adler32", "Adler-32 as 8 hex digits"),
        ("sha1", "SHA-1 as 40 hex digits"),
    ):
        sub = commands.add_parser(name, help=description)
        sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
        sub.set_defaults(handler=_cmd_checksum)

    sub = commands.add_parser("png", help="Write a 4x4 solid-colour PNG")
    for component in ("red", "green", "blue", "alpha"):
        sub.add_argument(component, type=int, help=f"{component.capitalize()} (0-255)")
    sub.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    sub.add_argument("--base64", action="store_true", help="Print the PNG as base64")
    sub.set_defaults(handler=_cmd_png)

    sub = commands.add_parser("vlq-encode", help="Encode integers as base64 VLQ")
    sub.add_argument("values", type=int, nargs="+", help="Integers to encode")
    sub.set_defaults(handler=_cmd_vlq_encode)

    sub = commands.add_parser("vlq-decode", help="Decode base64 VLQ text")
    sub.add_argument("text", help="VLQ string")
    sub.set_defaults(handler=_cmd_vlq_decode)

    sub = commands.add_parser("transcode", help="Read UTF-8/16/32 bytes, write UTF-8")
    sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    sub.add_argument(
        "--from",
        dest="source",
        choices=["utf-8", "utf-16", "utf-32"],
        default="utf-8",
        help="Source encoding",
    )
    sub.add_argument(
        "--endianness",
        choices=[member.value for member in Endianness],
        default=None,
        help="UTF-16/32 byte order (default from config)",
    )
    sub.add_argument("--strict", action="store_true", help="Fail on malformed input")
    sub.add_argument("--strip-bom", action="store_true", help="Drop a leading UTF-8 BOM")
    sub.add_argument("--code-points", action="store_true", help="Print U+XXXX codepoints")
    sub.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    sub.set_defaults(handler=_cmd_transcode)

    sub = commands.add_parser("ws-accept", help="Compute Sec-WebSocket-Accept")
    sub.add_argument("key", help="Sec-WebSocket-Key value")
    sub.set_defaults(handler=_cmd_ws_accept)

    sub = commands.add_parser("ws-decode", help="Decode one WebSocket frame as JSON")
    sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    sub.add_argument("--hex", action="store_true", help="Input is hex text")
    sub.add_argument("--keep-mask", action="store_true", help="Do not unmask the payload")
    sub.set_defaults(handler=_cmd_ws_decode)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_config(args.config)
        setup_logging(settings)
        return args.handler(args, settings)
    except (CodecError, ValueError, OSError, yaml.YAMLError) as exc:
        logger.error(f"{args.command} failed: {exc}")
        print(f"binkit: error: {exc}", file=sys.stderr)
        return 1
