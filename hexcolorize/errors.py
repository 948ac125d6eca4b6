"""Error taxonomy for hexcolorize.

Every error is recoverable: the public API returns the original text
alongside the error so callers who ignore it still get displayable output.
Unknown style names are deliberately *not* an error.
"""

from __future__ import annotations


class ColorizeError(Exception):
    """Base class for all hexcolorize errors.

    :param name: Short category tag, e.g. ``"HEXERR"``.
    :param msg: Human readable description.
    """

    name = "COLORIZE"

    def __init__(self, msg: str, name: str | None = None) -> None:
        if name is not None:
            self.name = name
        self.msg = msg
        super().__init__(f"{self.name}: {msg}")


class InvalidHexError(ColorizeError, ValueError):
    """Raised when a string is not a 6-digit hex color."""

    name = "HEXERR"

    def __init__(self, original_input: str) -> None:
        self.original_input = original_input
        super().__init__(f"invalid hex code: {original_input!r}")


class NoOptionsError(ColorizeError, ValueError):
    """Raised when formatting is requested with an empty option set."""

    name = "NOOPTS"

    def __init__(self, msg: str = "no options provided") -> None:
        super().__init__(msg)


class UnsupportedTerminalError(ColorizeError, RuntimeError):
    """Raised when neither true color nor xterm-256 is available."""

    name = "SYSNOCOLOR"

    def __init__(
        self, msg: str = "system does not support true color or xterm"
    ) -> None:
        super().__init__(msg)
