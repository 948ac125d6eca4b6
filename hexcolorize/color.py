"""Hex color validation and the immutable RGB value it produces.

Accepted input is an optional leading ``#`` followed by exactly six
hexadecimal digits in either case, e.g. ``'#12AB34'`` or ``'ff0000'``.
Anything else is rejected with :class:`InvalidHexError` before an
:class:`RGBColor` is ever constructed.
"""

from __future__ import annotations

import dataclasses
import re

from .errors import InvalidHexError

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclasses.dataclass(frozen=True)
class RGBColor:
    """Immutable 24-bit color.

    :param r: Red channel, int 0-255.
    :param g: Green channel, int 0-255.
    :param b: Blue channel, int 0-255.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        channels = (self.r, self.g, self.b)
        # bool is an int subclass but never a meaningful channel value
        if not all(
            isinstance(c, int) and not isinstance(c, bool) for c in channels
        ):
            raise ValueError(
                f"RGB channels must be ints, got {tuple(type(c).__name__ for c in channels)}"
            )
        if not all(0 <= c <= 255 for c in channels):
            raise ValueError(
                f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})"
            )

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBColor:
        return parse_hex(hex_color)

    def to_hex(self) -> str:
        """Return the canonical lowercase ``#rrggbb`` form."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


def is_valid_hex(hex_color: str) -> bool:
    return isinstance(hex_color, str) and _HEX_RE.fullmatch(hex_color) is not None


def parse_hex(hex_color: str) -> RGBColor:
    """Validate *hex_color* and convert it to an :class:`RGBColor`.

    A fresh value is returned on every call.

    :param hex_color: ``'#rrggbb'`` or ``'rrggbb'``, case-insensitive.
    :returns: The parsed color.
    :raises TypeError: If *hex_color* is not a str.
    :raises InvalidHexError: If *hex_color* is not a 6-digit hex color.
    """
    if not isinstance(hex_color, str):
        raise TypeError(
            f"hex color must be a str, got {type(hex_color).__name__}"
        )
    match = _HEX_RE.fullmatch(hex_color)
    if match is None:
        raise InvalidHexError(hex_color)
    r, g, b = (int(group, 16) for group in match.groups())
    return RGBColor(r, g, b)
