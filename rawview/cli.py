"""Command-line interface: decode a raw image file and save it as BMP."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from rawview.bmp import save_bmp
from rawview.decode import ColorSpace, InsufficientDataError, decode_file

_DIGITS = re.compile(r"\d+", re.ASCII)


def _dimension(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise argparse.ArgumentTypeError(f"invalid resolution value: {text!r}")
    return int(text)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="rawview",
        description="Decode a raw RGB or YUV image buffer and save it as a BMP file.",
    )
    parser.add_argument("input", help="raw image file")
    parser.add_argument("-W", "--width", type=_dimension, required=True, help="image width")
    parser.add_argument("-H", "--height", type=_dimension, required=True, help="image height")
    parser.add_argument(
        "-c",
        "--color-space",
        choices=[space.value for space in ColorSpace],
        default=ColorSpace.YUV422.value,
        help="layout of the raw data (default: %(default)s)",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        choices=(8, 10),
        default=8,
        help="bits per sample (default: %(default)s)",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="reverse the byte order within every 8-byte block first",
    )
    parser.add_argument("-o", "--output", help="BMP file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        image = decode_file(
            args.input, args.width, args.height, args.color_space, args.depth, args.reverse
        )
    except InsufficientDataError as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: Cannot open file: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        print(
            f"{image.width}x{image.height} {args.color_space} {args.depth}-bit "
            f"-> {image.pixel_format.name}"
        )
        return 0

    try:
        save_bmp(image, args.output)
    except OSError as exc:
        print(f"Error: Failed to save image: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0