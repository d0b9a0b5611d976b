"""
Seam location, backtracking and removal.

The seam ends at the leftmost minimum of the last scan line and is traced
backwards one line at a time. Among equally cheap predecessors the
straight step wins, then the left diagonal, then the right one, so the
same energy grid always yields the same seam.
"""

from __future__ import annotations

import numpy as np

from image_carver.errors import EmptySeam, InvalidBorder
from image_carver.grid import PixelGrid, check_orientation


def _scan_frame(energy: np.ndarray, border: int, orientation: str) -> np.ndarray:
    """Energy with scan lines as rows, checked against *border*."""
    check_orientation(orientation)
    scan = energy if orientation == "vertical" else energy.T
    if scan.shape[0] == 0 or scan.shape[1] == 0:
        raise EmptySeam(f"Energy grid of shape {energy.shape} has nothing to trace")
    if border < 1 or border > scan.shape[1]:
        raise InvalidBorder(f"Border {border} outside [1, {scan.shape[1]}]")
    return scan


def find_min_energy_endpoint(
    energy: np.ndarray, border: int, orientation: str = "vertical",
) -> int:
    """Index of the cheapest cell in the last scan line within ``[0, border)``.

    Ties keep the lower index.
    """
    last = _scan_frame(energy, border, orientation)[-1, :border]
    return int(np.argmin(last))


def _step(c: int, border: int, left: int, above: int, right: int) -> int:
    """Position in the previous scan line reached from position *c*."""
    if border == 1:
        return c
    if c == 0:
        return c if above <= right else c + 1
    if c == border - 1:
        return c if above <= left else c - 1
    if above == left:
        return c if above <= right else c + 1
    if above <= right:
        return c if above <= left else c - 1
    if left < above and left <= right:
        return c - 1
    if above < left and above <= right:
        return c
    return c + 1


def trace_seam(
    energy: np.ndarray, border: int, start: int, orientation: str = "vertical",
) -> np.ndarray:
    """Backtrack the seam ending at *start* in the last scan line.

    Args:
        energy:      Cumulative energy from :func:`compute_energy`.
        border:      Active bound along the scan axis.
        start:       Endpoint, usually from :func:`find_min_energy_endpoint`.
        orientation: ``"vertical"`` or ``"horizontal"``.

    Returns:
        int64 array with one position per scan line (a column per row for
        vertical seams, a row per column for horizontal ones).
    """
    scan = _scan_frame(energy, border, orientation)
    if not 0 <= start < border:
        raise InvalidBorder(f"Seam start {start} outside [0, {border})")

    n = scan.shape[0]
    seam = np.zeros(n, dtype=np.int64)
    seam[n - 1] = start
    c = start
    for i in range(n - 1, 0, -1):
        prev = scan[i - 1]
        left = int(prev[c - 1]) if c > 0 else 0
        right = int(prev[c + 1]) if c < border - 1 else 0
        c = _step(c, border, left, int(prev[c]), right)
        seam[i - 1] = c
    return seam


def validate_seam(seam: np.ndarray, length: int, border: int) -> None:
    """Raise :class:`InvalidBorder` unless *seam* is a connected path in ``[0, border)``."""
    if len(seam) != length:
        raise InvalidBorder(f"Seam has {len(seam)} entries, expected {length}")
    if len(seam) and (seam.min() < 0 or seam.max() >= border):
        raise InvalidBorder(f"Seam leaves the active band [0, {border})")
    if len(seam) > 1 and np.abs(np.diff(seam)).max() > 1:
        raise InvalidBorder("Seam steps more than one position between lines")


def remove_seam(
    grid: PixelGrid, seam: np.ndarray, border: int, orientation: str = "vertical",
) -> None:
    """Close the gap left by *seam* inside the active band, in place.

    Cells between the seam and *border* shift one step toward the seam;
    the last active cell of every line keeps its old value and drops out
    of the band once the caller shrinks *border*.
    """
    scan = grid.scan_view(orientation)
    if border < 1 or border > scan.shape[1]:
        raise InvalidBorder(f"Border {border} outside [1, {scan.shape[1]}]")
    validate_seam(seam, scan.shape[0], border)

    for i, c in enumerate(seam.tolist()):
        scan[i, c:border - 1] = scan[i, c + 1:border]
