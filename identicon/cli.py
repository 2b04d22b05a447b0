"""
identicon-gen - write a username's identicon to a PNG file.

Usage:
    identicon-gen <username> [--height 5] [--width 5] [--scale 10] [-o identicon.png]
"""

import argparse
import logging
import sys

from identicon.config import (
    DEFAULT_FILENAME, DEFAULT_HEIGHT, DEFAULT_SCALE, DEFAULT_WIDTH,
    DIGEST_ALGORITHM, LOG_LEVEL, MARGIN,
)
from identicon.kernel.digest import ALGORITHMS, UnknownDigestError
from identicon.kernel.icon import IconSizeError, generate_icon, validate_margin


def build_parser():
    parser = argparse.ArgumentParser(
        prog="identicon-gen",
        description="Generate a GitHub-style identicon PNG from a username.",
    )
    parser.add_argument("username", help="Username to derive the icon from")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT,
                        help=f"Grid rows, 1-50 (default: {DEFAULT_HEIGHT})")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help=f"Grid columns, 1-50 (default: {DEFAULT_WIDTH})")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help=f"Pixels per grid cell, 1-100 (default: {DEFAULT_SCALE})")
    parser.add_argument("--margin", type=int, default=MARGIN,
                        help=f"Transparent border in pixels (default: {MARGIN})")
    parser.add_argument("--algorithm", default=DIGEST_ALGORITHM,
                        help=f"Digest algorithm, one of {', '.join(ALGORITHMS)}")
    parser.add_argument("-o", "--output", default=DEFAULT_FILENAME,
                        help=f"Output PNG path (default: {DEFAULT_FILENAME})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_margin(args.margin)
        icon = generate_icon(args.username, args.height, args.width, args.scale,
                             algorithm=args.algorithm)
    except (IconSizeError, UnknownDigestError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        icon.save(args.output, margin=args.margin)
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {args.output} ({icon.color.hex})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
