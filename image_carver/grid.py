"""Mutable pixel buffer backing an image.

Pixels live in one flat ``(rows * cols, 3)`` uint8 arena in row-major
order. All coordinate access goes through :meth:`PixelGrid.index`, and
:attr:`PixelGrid.pixels` exposes a ``(rows, cols, 3)`` view of the same
memory for vectorised work, so writes through the view mutate the grid.
"""

from __future__ import annotations

import numpy as np

from image_carver.pixel import MAX_CHANNEL, Pixel

ORIENTATIONS = ("vertical", "horizontal")


def check_orientation(orientation: str) -> None:
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Invalid orientation: {orientation}")


class PixelGrid:
    """A ``rows x cols`` grid of RGB pixels."""

    def __init__(self, rows: int, cols: int, data: np.ndarray | None = None) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        if data is None:
            self._data = np.zeros((rows * cols, 3), dtype=np.uint8)
        else:
            if data.shape != (rows * cols, 3):
                raise ValueError(
                    f"Expected flat buffer of shape {(rows * cols, 3)}, got {data.shape}"
                )
            self._data = data

    # -- construction --------------------------------------------------

    @classmethod
    def from_array(cls, array: np.ndarray) -> PixelGrid:
        """Copy an (H, W, 3) integer array into a new grid."""
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) array, got shape {array.shape}")
        if array.size and (array.min() < 0 or array.max() > MAX_CHANNEL):
            raise ValueError("Channel values must lie in 0..255")
        h, w = array.shape[:2]
        return cls(h, w, np.ascontiguousarray(array, dtype=np.uint8).reshape(-1, 3).copy())

    @classmethod
    def random(cls, rows: int, cols: int, seed: int | None = None) -> PixelGrid:
        """Grid of uniformly random pixels (reproducible when *seed* is given)."""
        rng = np.random.default_rng(seed)
        return cls(rows, cols, rng.integers(0, 256, size=(rows * cols, 3), dtype=np.uint8))

    def copy(self) -> PixelGrid:
        return PixelGrid(self.rows, self.cols, self._data.copy())

    # -- access --------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def pixels(self) -> np.ndarray:
        """(rows, cols, 3) view sharing memory with the grid."""
        return self._data.reshape(self.rows, self.cols, 3)

    def index(self, row: int, col: int) -> int:
        """Map ``(row, col)`` to a position in the flat arena."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def __getitem__(self, key: tuple[int, int]) -> Pixel:
        r, g, b = self._data[self.index(*key)]
        return Pixel(int(r), int(g), int(b))

    def __setitem__(self, key: tuple[int, int], pixel: tuple[int, int, int]) -> None:
        self._data[self.index(*key)] = pixel

    def dimension(self, orientation: str) -> int:
        """Size along the scan axis: columns for vertical seams, rows for horizontal."""
        check_orientation(orientation)
        return self.cols if orientation == "vertical" else self.rows

    def scan_view(self, orientation: str) -> np.ndarray:
        """View where every scan line is a row: the grid itself or its transpose."""
        check_orientation(orientation)
        if orientation == "vertical":
            return self.pixels
        return self.pixels.transpose(1, 0, 2)

    def to_array(self) -> np.ndarray:
        return self.pixels.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"PixelGrid(rows={self.rows}, cols={self.cols})"
