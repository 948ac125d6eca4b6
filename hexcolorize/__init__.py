"""Hex color and style formatting for ANSI terminals.

Typical use::

    import hexcolorize as hc

    text, err = hc.foreground_text("Warning", "#FF8800")
    print(text)  # falls back to the plain text when err is set
"""

from __future__ import annotations

from .ansi import strip_ansi, visible_length
from .codes import RESET, CapabilityLevel, ColorContext, emit_color_code
from .color import RGBColor, is_valid_hex, parse_hex
from .configurations.terminal_config import (
    TerminalConfig,
    capability_from_flags,
    detect_capability,
)
from .errors import (
    ColorizeError,
    InvalidHexError,
    NoOptionsError,
    UnsupportedTerminalError,
)
from .formatter import (
    TextFormatter,
    background_text,
    foreground_text,
    format_text,
    get_color_code,
    get_default_formatter,
    refresh_capability,
    set_default_capability,
    style_text,
)
from .styles import STYLE_CODES, resolve_style
from .types import ColorCodeResult, FormatOptions, FormatResult
from .xterm import reduce_many, reduce_to_xterm256

__all__ = [
    "RESET",
    "STYLE_CODES",
    "CapabilityLevel",
    "ColorCodeResult",
    "ColorContext",
    "ColorizeError",
    "FormatOptions",
    "FormatResult",
    "InvalidHexError",
    "NoOptionsError",
    "RGBColor",
    "TerminalConfig",
    "TextFormatter",
    "UnsupportedTerminalError",
    "background_text",
    "capability_from_flags",
    "detect_capability",
    "emit_color_code",
    "foreground_text",
    "format_text",
    "get_color_code",
    "get_default_formatter",
    "is_valid_hex",
    "parse_hex",
    "reduce_many",
    "reduce_to_xterm256",
    "refresh_capability",
    "resolve_style",
    "set_default_capability",
    "strip_ansi",
    "style_text",
    "visible_length",
]
