"""Style name to SGR code lookup.

Unknown names resolve to ``None`` and are skipped by the formatter.
"""

from __future__ import annotations

STYLE_CODES: dict[str, str] = {
    "bold": "\x1b[1m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "reverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "stroke": "\x1b[9m",
}


def resolve_style(name: str) -> str | None:
    return STYLE_CODES.get(name)
