"""Iterated seam removal over a shrinking active region."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import numpy as np

from image_carver.energy import compute_energy
from image_carver.errors import InsufficientDimension
from image_carver.grid import PixelGrid
from image_carver.seam import find_min_energy_endpoint, remove_seam, trace_seam
from image_carver.transforms import crop

logger = logging.getLogger(__name__)

SeamCallback = Callable[[int, np.ndarray], None]


def carve(
    grid: PixelGrid,
    iterations: int,
    orientation: str = "vertical",
    callback: SeamCallback | None = None,
) -> PixelGrid:
    """Remove *iterations* minimum-energy seams from *grid* in place.

    Each pass recomputes the energy of the current active band, traces the
    cheapest seam, closes the gap and shrinks the band by one. The buffer is
    never reallocated: afterwards only the first ``dimension - iterations``
    columns (vertical) or rows (horizontal) are meaningful.

    Args:
        grid:        Grid to carve; mutated in place.
        iterations:  Number of seams to remove.
        orientation: ``"vertical"`` or ``"horizontal"``.
        callback:    Called as ``callback(iteration, seam)`` after each removal.

    Returns:
        The same *grid*.

    Raises:
        InsufficientDimension: *iterations* leaves no pixel on the scan axis.
    """
    dimension = grid.dimension(orientation)
    if iterations < 0:
        raise ValueError(f"Seam count must be non-negative, got {iterations}")
    if iterations >= dimension:
        raise InsufficientDimension(
            f"Cannot remove {iterations} {orientation} seams from a grid "
            f"{dimension} wide along the scan axis"
        )

    logger.info(
        "Carving %d %s seams from %dx%d grid", iterations, orientation, grid.cols, grid.rows,
    )
    t0 = time.perf_counter()
    border = dimension
    for it in range(iterations):
        energy = compute_energy(grid, border, orientation)
        start = find_min_energy_endpoint(energy, border, orientation)
        seam = trace_seam(energy, border, start, orientation)
        remove_seam(grid, seam, border, orientation)
        border -= 1
        logger.debug(
            "Seam %d: endpoint=%d cost=%d",
            it + 1, start, _seam_cost(energy, start, orientation),
        )
        if callback is not None:
            callback(it, seam)

    logger.info("Carving done  (%.2f s)", time.perf_counter() - t0)
    return grid


def _seam_cost(energy: np.ndarray, start: int, orientation: str) -> int:
    if orientation == "vertical":
        return int(energy[-1, start])
    return int(energy[start, -1])


def seam_carve(
    grid: PixelGrid,
    iterations: int,
    orientation: str = "vertical",
    callback: SeamCallback | None = None,
) -> PixelGrid:
    """Carve *grid* in place and return a new grid trimmed to the active region."""
    carve(grid, iterations, orientation, callback)
    if orientation == "vertical":
        return crop(grid, 0, grid.cols - iterations, 0, grid.rows)
    return crop(grid, 0, grid.cols, 0, grid.rows - iterations)
