"""Text formatting: styles, background and foreground colors around text.

The :class:`TextFormatter` is bound to a capability level (or a provider
callable that returns one) instead of reading process-wide state, so it can
be constructed with any level in tests.  The module-level functions
delegate to a default formatter whose level is detected from the
environment once at import.

Every public call returns the original text alongside the error when
formatting is not possible; nothing here raises for a bad color, an empty
option set or an unsupported terminal.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Union

from .codes import RESET, CapabilityLevel, ColorContext, emit_color_code
from .color import parse_hex
from .configurations.terminal_config import detect_capability
from .errors import ColorizeError, NoOptionsError, UnsupportedTerminalError
from .styles import resolve_style
from .types import ColorCodeResult, FormatOptions, FormatResult

logger = logging.getLogger(__name__)

CapabilitySource = Union[CapabilityLevel, Callable[[], CapabilityLevel]]


class TextFormatter:
    """Applies styles and colors to text for a given capability level.

    :param capability: A fixed :class:`CapabilityLevel`, or a zero-argument
        callable consulted on every call.
    """

    def __init__(self, capability: CapabilitySource) -> None:
        self._capability = capability

    @property
    def capability(self) -> CapabilityLevel:
        if callable(self._capability):
            return self._capability()
        return self._capability

    def color_code(
        self, hex_color: str, ctx: ColorContext | str = ColorContext.FOREGROUND
    ) -> ColorCodeResult:
        """Return the escape code for *hex_color* without any reset.

        Useful when the same color is used in several places::

            red = formatter.color_code("#FF0000").code
            line = red + "warning" + RESET
        """
        ctx = ColorContext(ctx)
        try:
            color = parse_hex(hex_color)
            code = emit_color_code(color, ctx, self.capability)
        except ColorizeError as err:
            logger.debug(f"No color code for {hex_color!r}: {err}")
            return ColorCodeResult("", err)
        return ColorCodeResult(code)

    def format(
        self,
        text: str,
        options: FormatOptions | None = None,
        *,
        background: str | None = None,
        foreground: str | None = None,
        styles: Iterable[str] = (),
    ) -> FormatResult:
        """Decorate *text* according to *options*.

        Options may be given as a :class:`FormatOptions` or as keyword
        arguments, not both.  Output is style codes, then the background
        code, then the foreground code, then *text*, then a reset.  The
        reset is only appended when at least one code was prepended.

        :returns: A :class:`FormatResult`; on error its ``text`` is the
            unmodified input.
        """
        if options is not None and (background or foreground or styles):
            raise TypeError("pass either options or keyword arguments, not both")
        if options is None:
            options = FormatOptions(
                background=background, foreground=foreground, styles=styles
            )

        if options.is_empty:
            return self._fail(text, NoOptionsError())

        capability = self.capability
        if not capability.supports_color:
            return self._fail(text, UnsupportedTerminalError())

        parts: list[str] = []
        for name in options.styles:
            code = resolve_style(name)
            if code is None:
                logger.debug(f"Ignoring unknown style {name!r}")
                continue
            parts.append(code)

        for hex_color, ctx in (
            (options.background, ColorContext.BACKGROUND),
            (options.foreground, ColorContext.FOREGROUND),
        ):
            if not hex_color:
                continue
            try:
                parts.append(emit_color_code(parse_hex(hex_color), ctx, capability))
            except ColorizeError as err:
                return self._fail(text, err)

        if not parts:
            return FormatResult(text)
        return FormatResult("".join(parts) + text + RESET)

    def foreground(self, text: str, hex_color: str) -> FormatResult:
        return self.format(text, FormatOptions(foreground=hex_color))

    def background(self, text: str, hex_color: str) -> FormatResult:
        return self.format(text, FormatOptions(background=hex_color))

    def style(self, text: str, styles: Iterable[str]) -> str:
        """Apply *styles* to *text*; failures fall back to *text* silently."""
        return self.format(text, FormatOptions(styles=tuple(styles))).text

    @staticmethod
    def _fail(text: str, err: ColorizeError) -> FormatResult:
        logger.debug(f"Returning unformatted text: {err}")
        return FormatResult(text, err)


# ----------------------------------------------------------------------
# Process default
# ----------------------------------------------------------------------

_default_capability: CapabilitySource = detect_capability()


def _current_capability() -> CapabilityLevel:
    if callable(_default_capability):
        return _default_capability()
    return _default_capability


_default_formatter = TextFormatter(_current_capability)


def get_default_formatter() -> TextFormatter:
    return _default_formatter


def set_default_capability(capability: CapabilitySource) -> None:
    """Replace the capability used by the module-level functions."""
    global _default_capability
    _default_capability = capability


def refresh_capability(environ: Mapping[str, str] | None = None) -> CapabilityLevel:
    """Re-detect the default capability from *environ* (or ``os.environ``)."""
    level = detect_capability(environ)
    set_default_capability(level)
    return level


def get_color_code(
    hex_color: str, ctx: ColorContext | str = ColorContext.FOREGROUND
) -> ColorCodeResult:
    return _default_formatter.color_code(hex_color, ctx)


def format_text(
    text: str, options: FormatOptions | None = None, **kwargs
) -> FormatResult:
    return _default_formatter.format(text, options, **kwargs)


def foreground_text(text: str, hex_color: str) -> FormatResult:
    return _default_formatter.foreground(text, hex_color)


def background_text(text: str, hex_color: str) -> FormatResult:
    return _default_formatter.background(text, hex_color)


def style_text(text: str, styles: Iterable[str]) -> str:
    return _default_formatter.style(text, styles)
