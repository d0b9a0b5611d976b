"""
Image Carver
============

Edit plain-text pixmaps held as dense pixel grids. The centrepiece is
content-aware resizing: seam carving repeatedly removes the connected
column (or row) path with the least cumulative colour-difference energy.
Crop, transpose, rotate, mirror, invert and flood-fill round it out.
"""

__version__ = "0.1.0"

from image_carver.carver import carve, seam_carve
from image_carver.config import CarverConfig
from image_carver.energy import compute_energy, local_energy
from image_carver.errors import (
    CarverError,
    EmptySeam,
    InsufficientDimension,
    InvalidBorder,
    NumericOverflow,
    PPMFormatError,
)
from image_carver.grid import PixelGrid
from image_carver.image_io import PPMImage, load_image, read_ppm, save_image, write_ppm
from image_carver.pixel import Pixel, color_diff
from image_carver.seam import find_min_energy_endpoint, remove_seam, trace_seam

__all__ = [
    "CarverConfig",
    "CarverError",
    "EmptySeam",
    "InsufficientDimension",
    "InvalidBorder",
    "NumericOverflow",
    "PPMFormatError",
    "PPMImage",
    "Pixel",
    "PixelGrid",
    "carve",
    "color_diff",
    "compute_energy",
    "find_min_energy_endpoint",
    "load_image",
    "local_energy",
    "read_ppm",
    "remove_seam",
    "save_image",
    "seam_carve",
    "trace_seam",
    "write_ppm",
]
