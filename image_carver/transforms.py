"""Whole-image transforms and statistics.

Everything here is a straight per-pixel copy over the grid's numpy view.
``invert`` and ``flood_fill`` recolour in place; the geometric transforms
return new grids.
"""

from __future__ import annotations

import numpy as np
from skimage.segmentation import flood

from image_carver.grid import PixelGrid
from image_carver.image_io import PPMImage
from image_carver.pixel import MAX_CHANNEL, invert_channels


def crop(grid: PixelGrid, x1: int, x2: int, y1: int, y2: int) -> PixelGrid:
    """Columns ``[x1, x2)`` and rows ``[y1, y2)`` as a new grid."""
    if not (0 <= x1 < x2 <= grid.cols and 0 <= y1 < y2 <= grid.rows):
        raise ValueError(
            f"Crop box x=[{x1}, {x2}) y=[{y1}, {y2}) does not fit a "
            f"{grid.cols}x{grid.rows} grid"
        )
    return PixelGrid.from_array(grid.pixels[y1:y2, x1:x2])


def transpose(grid: PixelGrid) -> PixelGrid:
    return PixelGrid.from_array(grid.pixels.transpose(1, 0, 2))


def rotate(grid: PixelGrid, turns: int = 2) -> PixelGrid:
    """Rotate clockwise by *turns* quarter turns (default 180 degrees)."""
    return PixelGrid.from_array(np.rot90(grid.pixels, k=-turns, axes=(0, 1)))


def mirror(grid: PixelGrid) -> PixelGrid:
    """Flip left to right."""
    return PixelGrid.from_array(grid.pixels[:, ::-1])


def invert(grid: PixelGrid, max_value: int = MAX_CHANNEL) -> PixelGrid:
    """Replace every channel ``c`` with ``max_value - c``, in place."""
    if not 0 < max_value <= MAX_CHANNEL:
        raise ValueError(f"max_value must lie in 1..{MAX_CHANNEL}, got {max_value}")
    px = grid.pixels
    if px.max() > max_value:
        raise ValueError(f"Grid holds channel values above max_value={max_value}")
    px[...] = invert_channels(px, max_value)
    return grid


def _packed_colors(grid: PixelGrid) -> np.ndarray:
    """(rows, cols) uint32 with each pixel packed as 0xRRGGBB."""
    px = grid.pixels.astype(np.uint32)
    return (px[..., 0] << 16) | (px[..., 1] << 8) | px[..., 2]


def flood_fill(
    grid: PixelGrid, x: int, y: int, color: tuple[int, int, int],
) -> PixelGrid:
    """Recolour the 4-connected region sharing the colour of pixel ``(x, y)``.

    Only pixels exactly equal to the seed colour belong to the region.
    Mutates *grid* and returns it.
    """
    if not (0 <= x < grid.cols and 0 <= y < grid.rows):
        raise IndexError(f"Seed ({x}, {y}) outside {grid.cols}x{grid.rows} grid")
    if any(not 0 <= c <= MAX_CHANNEL for c in color):
        raise ValueError(f"Fill colour {color} has channels outside 0..{MAX_CHANNEL}")
    mask = flood(_packed_colors(grid), (y, x), connectivity=1)
    grid.pixels[mask] = color
    return grid


def brightness(grid: PixelGrid) -> int:
    """Mean over pixels of ``(r + g + b) // 3``, rounded down."""
    px = grid.pixels.astype(np.int64)
    per_pixel = px.sum(axis=2) // 3
    return int(per_pixel.sum() // per_pixel.size)


def statistics(image: PPMImage) -> dict[str, str | int]:
    """Summary shown by the ``statistics`` command."""
    return {
        "Type": image.magic_number,
        "Height": image.grid.rows,
        "Width": image.grid.cols,
        "Brightness": brightness(image.grid),
    }
