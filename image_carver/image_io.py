"""Plain-text pixmap (PPM ``P3``) codec plus Pillow-backed loading and saving."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from image_carver.errors import PPMFormatError
from image_carver.grid import PixelGrid
from image_carver.pixel import MAX_CHANNEL

PPM_MAGIC = "P3"
PPM_EXTENSIONS = frozenset({".ppm", ".pnm"})

_COMMENT = re.compile(r"#[^\n]*")


@dataclass
class PPMImage:
    """A pixel grid plus the header fields it was read with.

    Attributes:
        magic_number: Format tag, ``"P3"`` for plain-text pixmaps.
        max_value:    Largest channel value declared in the header.
        grid:         The pixels.
    """

    magic_number: str
    max_value: int
    grid: PixelGrid


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PPMFormatError(f"Failed to parse {what}: {token!r}") from None


def parse_ppm(text: str) -> PPMImage:
    """Parse a plain-text pixmap.

    The header holds the magic number, width, height and maximum channel
    value; the body is whitespace-separated ``r g b`` triples in row-major
    order. ``#`` comments are ignored anywhere.
    """
    tokens = _COMMENT.sub(" ", text).split()
    if len(tokens) < 4:
        raise PPMFormatError("Error in parsing the header")

    magic = tokens[0]
    if magic != PPM_MAGIC:
        raise PPMFormatError(f"Unsupported magic number {magic!r}, expected {PPM_MAGIC}")
    width = _parse_int(tokens[1], "width")
    height = _parse_int(tokens[2], "height")
    max_value = _parse_int(tokens[3], "maximum channel value")
    if width < 1 or height < 1:
        raise PPMFormatError(f"Invalid dimensions {width}x{height}")
    if not 0 < max_value <= MAX_CHANNEL:
        raise PPMFormatError(f"Maximum channel value {max_value} outside 1..{MAX_CHANNEL}")

    body = tokens[4:]
    expected = width * height * 3
    if len(body) != expected:
        raise PPMFormatError(
            f"Expected {expected} channel values for {width}x{height}, got {len(body)}"
        )
    values = np.array([_parse_int(t, "pixel component") for t in body], dtype=np.int64)
    if values.min() < 0 or values.max() > max_value:
        raise PPMFormatError(f"Pixel component outside 0..{max_value}")

    grid = PixelGrid(height, width, values.astype(np.uint8).reshape(-1, 3))
    return PPMImage(magic, max_value, grid)


def format_ppm(image: PPMImage, field_width: int = 3) -> str:
    """Serialise *image* as a plain-text pixmap, one pixel row per line."""
    grid = image.grid
    lines = [image.magic_number, f"{grid.cols} {grid.rows}", str(image.max_value)]
    for row in grid.pixels:
        lines.append("".join(
            f"{r:{field_width}} {g:{field_width}} {b:{field_width}} "
            for r, g, b in row.tolist()
        ))
    return "\n".join(lines) + "\n"


def read_ppm(path: str | Path) -> PPMImage:
    return parse_ppm(Path(path).read_text())


def write_ppm(image: PPMImage, path: str | Path, field_width: int = 3) -> None:
    Path(path).write_text(format_ppm(image, field_width))


def load_image(path: str | Path) -> PPMImage:
    """Load a pixmap directly, anything else through Pillow as 8-bit RGB."""
    path = Path(path)
    if path.suffix.lower() in PPM_EXTENSIONS:
        return read_ppm(path)
    img = Image.open(path).convert("RGB")
    return PPMImage(PPM_MAGIC, MAX_CHANNEL, PixelGrid.from_array(np.array(img, dtype=np.uint8)))


def save_image(image: PPMImage, path: str | Path, field_width: int = 3) -> None:
    """Save as a plain-text pixmap for ``.ppm``/``.pnm``, otherwise via Pillow."""
    path = Path(path)
    if path.suffix.lower() in PPM_EXTENSIONS:
        write_ppm(image, path, field_width)
        return
    Image.fromarray(image.grid.to_array()).save(path)
