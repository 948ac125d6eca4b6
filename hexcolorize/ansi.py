"""Helpers for working with text that already carries SGR sequences."""

from __future__ import annotations

import re

_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove all SGR escape sequences from *text*."""
    return _SGR_RE.sub("", text)


def visible_length(text: str) -> int:
    """Length of *text* as displayed, ignoring escape sequences."""
    return len(strip_ansi(text))
