"""Pixel value type and the squared-distance colour metric."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

MAX_CHANNEL = 255
MAX_COLOR_DIFF = 3 * MAX_CHANNEL ** 2  # 195075


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int


def color_diff(a: Pixel, b: Pixel) -> int:
    """Sum of squared per-channel differences between two pixels."""
    dr = int(a.red) - int(b.red)
    dg = int(a.green) - int(b.green)
    db = int(a.blue) - int(b.blue)
    return dr * dr + dg * dg + db * db


def color_diff_array(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorised :func:`color_diff` over (..., 3) uint8 arrays.

    Channels are widened to int32 before subtracting so the -255..255
    differences and the 195075 maximum never wrap.

    Returns:
        (...) int64 array of distances.
    """
    diff = a.astype(np.int32) - b.astype(np.int32)
    return np.sum(diff * diff, axis=-1, dtype=np.int64)


def invert_channels(values: np.ndarray, max_value: int = MAX_CHANNEL) -> np.ndarray:
    """Channel-wise complement ``max_value - c`` of a uint8 array."""
    return (max_value - values.astype(np.int16)).astype(np.uint8)
