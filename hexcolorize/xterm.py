"""Nearest-color reduction from 24-bit RGB to the Xterm 256-color palette.

Each channel is bucketed into one of six levels with a fixed scaling factor
of 255 / 5 and a +0.4 bias before rounding half away from zero.  Equal
levels on all three channels select the grayscale branch; everything else
lands in the 6x6x6 color cube that starts at index 16.

The grayscale branch only samples every fifth entry of the 24-step ramp
(232-255), and with the bias only four of those are ever produced.
"""

from __future__ import annotations

import math

import numpy as np

from .color import RGBColor

SCALING_FACTOR = 255 // 5
ROUNDING_BIAS = 0.4
MAX_LEVEL = 5

XTERM_BLACK = 0
XTERM_WHITE = 15
GRAY_OFFSET = 232
GRAY_STEP = 5
CUBE_OFFSET = 16
CUBE_RED_FACTOR = 36
CUBE_GREEN_FACTOR = 6


def channel_level(value: int) -> int:
    """Bucket a single 0-255 channel into a cube level 0-5."""
    level = math.floor(value / SCALING_FACTOR + ROUNDING_BIAS + 0.5)
    return min(MAX_LEVEL, max(0, level))


def reduce_to_xterm256(color: RGBColor) -> int:
    """Map *color* to the nearest Xterm 256-color palette index.

    :param color: Color to reduce.
    :returns: Palette index in ``range(256)``.
    """
    r = channel_level(color.r)
    g = channel_level(color.g)
    b = channel_level(color.b)

    if r == g == b:
        if r == 0:
            return XTERM_BLACK
        if r == MAX_LEVEL:
            return XTERM_WHITE
        return GRAY_OFFSET + (r - 1) * GRAY_STEP

    return CUBE_OFFSET + CUBE_RED_FACTOR * r + CUBE_GREEN_FACTOR * g + b


def reduce_many(colors) -> np.ndarray:
    """Vectorized :func:`reduce_to_xterm256` over an ``(N, 3)`` array.

    :param colors: Array-like of RGB rows with ints 0-255, or a sequence of
        :class:`RGBColor`.
    :returns: ``uint8`` array of shape ``(N,)``.
    :raises ValueError: If the input is not ``(N, 3)`` or out of range.
    """
    rows = [
        c.as_tuple() if isinstance(c, RGBColor) else c for c in colors
    ]
    arr = np.asarray(rows, dtype=np.int64)
    if arr.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (N, 3) array of RGB rows, got shape {arr.shape}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError("RGB values must be 0-255")

    levels = np.floor(arr / SCALING_FACTOR + ROUNDING_BIAS + 0.5)
    levels = np.clip(levels, 0, MAX_LEVEL).astype(np.int64)
    r, g, b = levels[:, 0], levels[:, 1], levels[:, 2]

    cube = CUBE_OFFSET + CUBE_RED_FACTOR * r + CUBE_GREEN_FACTOR * g + b
    gray = np.select(
        [r == 0, r == MAX_LEVEL],
        [XTERM_BLACK, XTERM_WHITE],
        default=GRAY_OFFSET + (r - 1) * GRAY_STEP,
    )
    is_gray = (r == g) & (g == b)
    return np.where(is_gray, gray, cube).astype(np.uint8)
