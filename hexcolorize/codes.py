"""Escape-sequence generation for a color under a capability level."""

from __future__ import annotations

from enum import Enum

from .color import RGBColor
from .errors import UnsupportedTerminalError
from .xterm import reduce_to_xterm256

ESC = "\x1b"
RESET = f"{ESC}[0m"

FG_TRUE_COLOR = f"{ESC}[38;2;"
BG_TRUE_COLOR = f"{ESC}[48;2;"
FG_XTERM = f"{ESC}[38;5;"
BG_XTERM = f"{ESC}[48;5;"


class ColorContext(Enum):
    """Which SGR prefix family a color code uses."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


class CapabilityLevel(Enum):
    """Color depth the terminal is assumed to support.

    - TRUE_COLOR: 24-bit ``38;2`` / ``48;2`` sequences
    - XTERM256: palette ``38;5`` / ``48;5`` sequences
    - NONE: no color sequences can be produced
    """

    TRUE_COLOR = "truecolor"
    XTERM256 = "xterm256"
    NONE = "none"

    @property
    def supports_color(self) -> bool:
        return self is not CapabilityLevel.NONE


def true_color_code(color: RGBColor, ctx: ColorContext) -> str:
    prefix = BG_TRUE_COLOR if ctx is ColorContext.BACKGROUND else FG_TRUE_COLOR
    return f"{prefix}{color.r};{color.g};{color.b}m"


def xterm_code(color: RGBColor, ctx: ColorContext) -> str:
    prefix = BG_XTERM if ctx is ColorContext.BACKGROUND else FG_XTERM
    return f"{prefix}{reduce_to_xterm256(color)}m"


def emit_color_code(
    color: RGBColor, ctx: ColorContext, capability: CapabilityLevel
) -> str:
    """Return the escape sequence that selects *color* in context *ctx*.

    :param color: Color to encode.
    :param ctx: Foreground or background.
    :param capability: Detected terminal capability.
    :returns: The escape sequence, without a trailing reset.
    :raises UnsupportedTerminalError: If *capability* is ``NONE``.
    """
    if capability is CapabilityLevel.TRUE_COLOR:
        return true_color_code(color, ctx)
    if capability is CapabilityLevel.XTERM256:
        return xterm_code(color, ctx)
    raise UnsupportedTerminalError()
