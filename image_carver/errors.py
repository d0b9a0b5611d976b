"""Exceptions raised by the carving kernel and the file layer."""

from __future__ import annotations


class CarverError(ValueError):
    """Base class for every error raised by image_carver."""


class InvalidBorder(CarverError):
    """The active bound is zero or exceeds the grid along the scan axis."""


class InsufficientDimension(CarverError):
    """More seams were requested than the scan axis can give up."""


class EmptySeam(CarverError):
    """The energy grid has nothing to trace a seam through."""


class NumericOverflow(CarverError):
    """Cumulative energy cannot be represented in any unsigned dtype."""


class PPMFormatError(CarverError):
    """Malformed plain-text pixmap data."""
