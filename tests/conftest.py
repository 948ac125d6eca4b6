"""
Shared pytest fixtures for hexcolorize tests.

Provides:
- true_color / xterm / no_color: TextFormatter instances bound to a fixed
  capability level, so no test depends on the real terminal
- default_capability: temporarily replaces the capability used by the
  module-level API and restores it afterwards
"""

from __future__ import annotations

import pytest

from hexcolorize import formatter as formatter_module
from hexcolorize.codes import CapabilityLevel
from hexcolorize.formatter import TextFormatter


@pytest.fixture
def true_color() -> TextFormatter:
    return TextFormatter(CapabilityLevel.TRUE_COLOR)


@pytest.fixture
def xterm() -> TextFormatter:
    return TextFormatter(CapabilityLevel.XTERM256)


@pytest.fixture
def no_color() -> TextFormatter:
    return TextFormatter(CapabilityLevel.NONE)


@pytest.fixture
def default_capability():
    """Yield a setter for the module-level capability; restore on teardown."""
    saved = formatter_module._default_capability
    yield formatter_module.set_default_capability
    formatter_module.set_default_capability(saved)
