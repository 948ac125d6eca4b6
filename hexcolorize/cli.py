"""Command-line front end.

Usage:
    hexcolorize --fg '#FF0000' --style bold "Hello, world"
    hexcolorize --bg 1e1e2e --fg cdd6f4 --xterm256 "Hello, world"
    hexcolorize --reduce '#808080'

On a color error the original text is still printed to stdout, the error
goes to stderr and the exit status is 1.
"""

from __future__ import annotations

import argparse
import logging
import sys

from hexcolorize.codes import CapabilityLevel
from hexcolorize.color import parse_hex
from hexcolorize.configurations.terminal_config import TerminalConfig
from hexcolorize.errors import ColorizeError
from hexcolorize.styles import STYLE_CODES
from hexcolorize.types import FormatOptions
from hexcolorize.xterm import reduce_to_xterm256

logger = logging.getLogger(__name__)


def setup_logger(name, level=logging.WARNING):
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexcolorize",
        description="Color and style text for ANSI terminals from hex colors.",
    )
    parser.add_argument("text", nargs="*", help="Text to format (joined by spaces)")
    parser.add_argument("--fg", "--foreground", dest="foreground", help="Foreground hex color")
    parser.add_argument("--bg", "--background", dest="background", help="Background hex color")
    parser.add_argument(
        "--style",
        dest="styles",
        action="append",
        default=[],
        help=f"Text style, repeatable ({', '.join(STYLE_CODES)})",
    )

    depth = parser.add_mutually_exclusive_group()
    depth.add_argument(
        "--truecolor", dest="capability", action="store_const",
        const=CapabilityLevel.TRUE_COLOR, help="Force 24-bit color output",
    )
    depth.add_argument(
        "--xterm256", dest="capability", action="store_const",
        const=CapabilityLevel.XTERM256, help="Force 256-color output",
    )
    depth.add_argument(
        "--no-color", dest="capability", action="store_const",
        const=CapabilityLevel.NONE, help="Disable color output",
    )

    parser.add_argument(
        "--reduce", metavar="HEX",
        help="Print the Xterm 256-color index for HEX and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger("hexcolorize", logging.DEBUG if args.verbose else logging.WARNING)

    if args.reduce is not None:
        try:
            print(reduce_to_xterm256(parse_hex(args.reduce)))
        except ColorizeError as err:
            print(f"Error: {err}", file=sys.stderr)
            return 1
        return 0

    config = TerminalConfig()
    if args.capability is None:
        config.from_environment()
    else:
        config.capability_provider(lambda: args.capability)
    formatter = config.build()
    logger.debug(f"Formatting with capability {formatter.capability.value}")

    text = " ".join(args.text)
    result = formatter.format(
        text,
        FormatOptions(
            background=args.background,
            foreground=args.foreground,
            styles=args.styles,
        ),
    )
    print(result.text)
    if result.error is not None:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    return 0
