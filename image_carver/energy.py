"""
Energy functions for seam carving.

A pixel's energy is its dispensability score: the colour distance to its
left neighbour plus the distance to its predecessor along the scan axis.
Cumulative energy then adds, scan line by scan line, the cheapest of the
three reachable cells in the previous line, so the last line holds the
total cost of the best path ending at each position.

Both orientations share one implementation. Vertical seams scan rows top
to bottom; horizontal seams run the same sweep over the transposed view,
so there "left" means the cell above and the scan predecessor is the cell
in the previous column.
"""

from __future__ import annotations

import numpy as np

from image_carver.errors import InvalidBorder, NumericOverflow
from image_carver.grid import PixelGrid
from image_carver.pixel import MAX_COLOR_DIFF, color_diff_array


def energy_dtype(scan_length: int) -> np.dtype:
    """Narrowest unsigned dtype holding the worst-case cumulative energy.

    Every cell contributes at most two neighbour distances, so a path over
    *scan_length* lines never exceeds ``scan_length * 2 * MAX_COLOR_DIFF``.
    """
    bound = scan_length * 2 * MAX_COLOR_DIFF
    for dtype in (np.uint32, np.uint64):
        if bound <= np.iinfo(dtype).max:
            return np.dtype(dtype)
    raise NumericOverflow(
        f"Cumulative energy over {scan_length} scan lines exceeds uint64"
    )


def _check_border(grid: PixelGrid, border: int, orientation: str) -> None:
    dimension = grid.dimension(orientation)
    if border < 1 or border > dimension:
        raise InvalidBorder(
            f"Border {border} outside [1, {dimension}] for {orientation} seams"
        )


def _local_scan_energy(scan: np.ndarray, border: int) -> np.ndarray:
    """Local energy of the active band in scan-frame coordinates."""
    band = scan[:, :border]
    local = np.zeros(band.shape[:2], dtype=np.int64)
    # Left neighbour (absent in the first position of each line)
    local[:, 1:] += color_diff_array(band[:, 1:], band[:, :-1])
    # Scan predecessor (absent in the first line)
    local[1:, :] += color_diff_array(band[1:], band[:-1])
    return local


def _to_grid_frame(scan_values: np.ndarray, orientation: str) -> np.ndarray:
    if orientation == "vertical":
        return scan_values
    return np.ascontiguousarray(scan_values.T)


def local_energy(grid: PixelGrid, border: int, orientation: str = "vertical") -> np.ndarray:
    """Per-pixel local energy over the active band.

    Args:
        grid:        The pixel grid.
        border:      Active bound along the scan axis.
        orientation: ``"vertical"`` or ``"horizontal"``.

    Returns:
        int64 array, ``(rows, border)`` for vertical seams and
        ``(border, cols)`` for horizontal ones.
    """
    _check_border(grid, border, orientation)
    return _to_grid_frame(_local_scan_energy(grid.scan_view(orientation), border), orientation)


def compute_energy(grid: PixelGrid, border: int, orientation: str = "vertical") -> np.ndarray:
    """Cumulative energy over the active band.

    Args:
        grid:        The pixel grid.
        border:      Active bound along the scan axis, ``1 <= border <= dimension``.
        orientation: ``"vertical"`` or ``"horizontal"``.

    Returns:
        Unsigned array, ``(rows, border)`` for vertical seams and
        ``(border, cols)`` for horizontal ones.

    Raises:
        InvalidBorder: *border* is zero or larger than the scan axis.
        NumericOverflow: the grid is too long for any unsigned dtype.
    """
    _check_border(grid, border, orientation)
    scan = grid.scan_view(orientation)
    dtype = energy_dtype(scan.shape[0])

    energy = _local_scan_energy(scan, border).astype(dtype)
    for i in range(1, energy.shape[0]):
        prev = energy[i - 1]
        best = prev.copy()
        if border > 1:
            np.minimum(best[1:], prev[:-1], out=best[1:])
            np.minimum(best[:-1], prev[1:], out=best[:-1])
        energy[i] += best

    return _to_grid_frame(energy, orientation)

