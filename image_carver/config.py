"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CarverConfig:
    """Defaults shared by the CLI commands.

    Attributes:
        orientation:   Seam direction - "vertical" or "horizontal".
        magic_number:  Format tag written for generated pixmaps.
        max_value:     Maximum channel value written for generated pixmaps.
        field_width:   Column width of each channel value in written pixmaps.
        random_width:  Width of images produced by the ``random`` command.
        random_height: Height of images produced by the ``random`` command.
        seed:          Random seed for generated images (None = non-deterministic).
        output_dir:    Folder for results written without an explicit path.
    """

    orientation: str = "vertical"

    # Pixmap output
    magic_number: str = "P3"
    max_value: int = 255
    field_width: int = 3

    # Random image generation
    random_width: int = 1000
    random_height: int = 1000
    seed: int | None = None

    # Paths
    output_dir: Path = field(default_factory=lambda: Path("output"))

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".ppm", ".pnm", ".png", ".bmp", ".tiff", ".tif", ".jpg", ".jpeg", ".webp"}
    )
