"""Data structures passed into and returned from the formatter.

FormatOptions is the immutable request for a single formatting call.
FormatResult and ColorCodeResult pair an always-displayable value with an
optional error, so callers that ignore the error still get safe output.
"""

from __future__ import annotations

import dataclasses

from .errors import ColorizeError


@dataclasses.dataclass(frozen=True)
class FormatOptions:
    """Formatting request.

    An empty string for a color means the same as ``None``: not requested.

    :param background: Optional background hex color.
    :param foreground: Optional foreground hex color.
    :param styles: Style names, applied in the given order.
    """

    background: str | None = None
    foreground: str | None = None
    styles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # frozen dataclass prevents direct assignment; use object.__setattr__
        # to coerce lists (or a bare string) to a tuple.
        if isinstance(self.styles, str):
            object.__setattr__(self, "styles", (self.styles,))
        elif not isinstance(self.styles, tuple):
            object.__setattr__(self, "styles", tuple(self.styles or ()))

    @property
    def is_empty(self) -> bool:
        return not self.background and not self.foreground and not self.styles


@dataclasses.dataclass(frozen=True)
class FormatResult:
    """Formatted text plus the error that prevented formatting, if any.

    On error ``text`` is the original, unmodified input.  Unpacks as
    ``text, error``.
    """

    text: str
    error: ColorizeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return ``text``, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.text

    def __iter__(self):
        yield self.text
        yield self.error

    def __str__(self) -> str:
        return self.text


@dataclasses.dataclass(frozen=True)
class ColorCodeResult:
    """Escape code for a single color; ``code`` is ``""`` on error."""

    code: str
    error: ColorizeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.code

    def __iter__(self):
        yield self.code
        yield self.error

    def __str__(self) -> str:
        return self.code
