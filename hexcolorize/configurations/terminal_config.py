"""Terminal capability detection and the fluent formatter configuration.

Detection reads two signals from the environment:
    - ``COLORTERM`` set to ``truecolor`` or ``24bit``: 24-bit color
    - ``TERM`` set to ``xterm`` or any ``*-256color`` value: 256-color

True color wins when both are present.  ``NO_COLOR`` (any value)
disables color entirely, see https://no-color.org.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Mapping

from hexcolorize.codes import CapabilityLevel
from hexcolorize.utils.sentinels import NotProvided

logger = logging.getLogger(__name__)

TRUE_COLOR_VALUES = frozenset({"truecolor", "24bit"})
XTERM_TERMS = frozenset({"xterm"})
XTERM_256_SUFFIX = "-256color"


def capability_from_flags(true_color: bool, xterm256: bool) -> CapabilityLevel:
    """Collapse the two capability flags into a single level."""
    if true_color:
        return CapabilityLevel.TRUE_COLOR
    if xterm256:
        return CapabilityLevel.XTERM256
    return CapabilityLevel.NONE


def detect_capability(environ: Mapping[str, str] | None = None) -> CapabilityLevel:
    """Derive the capability level from environment variables.

    :param environ: Mapping to read from; defaults to ``os.environ``.
    :returns: The detected :class:`CapabilityLevel`.
    """
    if environ is None:
        environ = os.environ

    if environ.get("NO_COLOR") is not None:
        logger.debug("NO_COLOR is set; color disabled")
        return CapabilityLevel.NONE

    colorterm = environ.get("COLORTERM", "").strip().lower()
    term = environ.get("TERM", "").strip().lower()

    level = capability_from_flags(
        true_color=colorterm in TRUE_COLOR_VALUES,
        xterm256=term in XTERM_TERMS or term.endswith(XTERM_256_SUFFIX),
    )
    logger.debug(
        f"Detected capability {level.value} (COLORTERM={colorterm!r}, TERM={term!r})"
    )
    return level


class TerminalConfig:
    """Fluent builder for a :class:`~hexcolorize.formatter.TextFormatter`.

    Example::

        formatter = (
            TerminalConfig()
            .capability(true_color=False, xterm256=True)
            .build()
        )
    """

    def __init__(self):
        self.true_color: bool = False
        self.xterm256: bool = False
        self.provider: Callable[[], CapabilityLevel] | None = None

    def capability(
        self,
        true_color: bool = NotProvided,
        xterm256: bool = NotProvided,
    ) -> TerminalConfig:
        if true_color is not NotProvided:
            self.true_color = bool(true_color)

        if xterm256 is not NotProvided:
            self.xterm256 = bool(xterm256)

        self.provider = None
        return self

    def from_environment(
        self, environ: Mapping[str, str] | None = None
    ) -> TerminalConfig:
        level = detect_capability(environ)
        self.true_color = level is CapabilityLevel.TRUE_COLOR
        self.xterm256 = level is CapabilityLevel.XTERM256
        self.provider = None
        return self

    def capability_provider(
        self, provider: Callable[[], CapabilityLevel]
    ) -> TerminalConfig:
        """Use *provider* instead of fixed flags; it is called on every format."""
        self.provider = provider
        return self

    @property
    def level(self) -> CapabilityLevel:
        if self.provider is not None:
            return self.provider()
        return capability_from_flags(self.true_color, self.xterm256)

    def build(self):
        from hexcolorize.formatter import TextFormatter

        if self.provider is not None:
            return TextFormatter(self.provider)
        return TextFormatter(self.level)
