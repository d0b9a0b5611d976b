"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress

from image_carver import transforms
from image_carver.carver import seam_carve as carve_image
from image_carver.config import CarverConfig
from image_carver.grid import PixelGrid
from image_carver.image_io import PPMImage, load_image, save_image

app = typer.Typer(
    name="image-carver",
    help="Seam carving and simple transforms for plain-text pixmaps.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

# Defaults come from CarverConfig - single source of truth
_DEFAULTS = CarverConfig()

_DIRECTIONS = {"v": "vertical", "h": "horizontal"}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


@contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except (ValueError, IndexError, OSError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


def _parse_direction(direction: str) -> str:
    key = direction.lower()
    orientation = _DIRECTIONS.get(key, key)
    if orientation not in _DIRECTIONS.values():
        raise typer.BadParameter(f"direction must be 'v' or 'h', got {direction!r}")
    return orientation


def _load(path: Path) -> PPMImage:
    if path.suffix.lower() not in _DEFAULTS.SUPPORTED_EXTENSIONS:
        raise typer.BadParameter(
            f"unsupported file type {path.suffix!r}", param_hint="INPUT_PATH",
        )
    return load_image(path)


def _save(image: PPMImage, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    save_image(image, output, _DEFAULTS.field_width)
    console.print(
        f"[green]✓[/green] Saved to {output}  "
        f"[dim]{image.grid.cols}x{image.grid.rows}[/dim]"
    )


_INPUT = typer.Argument(..., help="Image to read (.ppm or any Pillow format)")
_OUTPUT = typer.Option(..., "--output", "-o", help="Where to write the result")


# -- seam carving ------------------------------------------------------

@app.command("seam-carve")
def seam_carve(
    input_path: Path = _INPUT,
    output: Path = _OUTPUT,
    iterations: int = typer.Option(..., "--iterations", "-i", help="Seams to remove"),
    direction: str = typer.Option(
        _DEFAULTS.orientation[0], "--direction", "-d",
        help="'v' removes columns, 'h' removes rows",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Shrink an image by removing its least important seams."""
    _setup_logging(verbose)
    orientation = _parse_direction(direction)
    with _reporting_errors():
        image = _load(input_path)
        with Progress(console=console, transient=True) as progress:
            task = progress.add_task(f"Carving {orientation} seams", total=iterations)
            image.grid = carve_image(
                image.grid, iterations, orientation,
                callback=lambda _it, _seam: progress.advance(task),
            )
        _save(image, output)


# -- statistics & generation -------------------------------------------

@app.command()
def statistics(input_path: Path = _INPUT) -> None:
    """Print type, dimensions and brightness."""
    with _reporting_errors():
        stats = transforms.statistics(_load(input_path))
    console.print(Panel.fit(
        "\n".join(f"[bold]{k + ':':<11}[/bold] {v}" for k, v in stats.items()),
        border_style="cyan",
    ))


@app.command()
def random(
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Where to write the image [default: output/random.ppm]",
    ),
    width: int = typer.Option(_DEFAULTS.random_width, "--width", "-w"),
    height: int = typer.Option(_DEFAULTS.random_height, "--height", "-h"),
    seed: int | None = typer.Option(_DEFAULTS.seed, "--seed", "-s", help="Random seed"),
) -> None:
    """Write an image of uniformly random pixels."""
    with _reporting_errors():
        grid = PixelGrid.random(height, width, seed=seed)
        if output is None:
            output = _DEFAULTS.output_dir / "random.ppm"
        _save(PPMImage(_DEFAULTS.magic_number, _DEFAULTS.max_value, grid), output)


# -- whole-image transforms --------------------------------------------

@app.command()
def transpose(input_path: Path = _INPUT, output: Path = _OUTPUT) -> None:
    """Swap rows and columns."""
    with _reporting_errors():
        image = _load(input_path)
        image.grid = transforms.transpose(image.grid)
        _save(image, output)


@app.command()
def rotate(
    input_path: Path = _INPUT,
    output: Path = _OUTPUT,
    turns: int = typer.Option(2, "--turns", "-t", help="Clockwise quarter turns"),
) -> None:
    """Rotate clockwise (180 degrees by default)."""
    with _reporting_errors():
        image = _load(input_path)
        image.grid = transforms.rotate(image.grid, turns)
        _save(image, output)


@app.command()
def invert(input_path: Path = _INPUT, output: Path = _OUTPUT) -> None:
    """Invert every colour channel."""
    with _reporting_errors():
        image = _load(input_path)
        transforms.invert(image.grid, image.max_value)
        _save(image, output)


@app.command()
def mirror(input_path: Path = _INPUT, output: Path = _OUTPUT) -> None:
    """Flip left to right."""
    with _reporting_errors():
        image = _load(input_path)
        image.grid = transforms.mirror(image.grid)
        _save(image, output)


@app.command()
def crop(
    input_path: Path = _INPUT,
    output: Path = _OUTPUT,
    x1: int = typer.Option(..., "--x1", help="First column kept"),
    x2: int = typer.Option(..., "--x2", help="Column after the last one kept"),
    y1: int = typer.Option(..., "--y1", help="First row kept"),
    y2: int = typer.Option(..., "--y2", help="Row after the last one kept"),
) -> None:
    """Keep the box of columns [x1, x2) and rows [y1, y2)."""
    with _reporting_errors():
        image = _load(input_path)
        image.grid = transforms.crop(image.grid, x1, x2, y1, y2)
        _save(image, output)


@app.command()
def fill(
    input_path: Path = _INPUT,
    output: Path = _OUTPUT,
    x: int = typer.Option(..., "--x", help="Seed column"),
    y: int = typer.Option(..., "--y", help="Seed row"),
    r: int = typer.Option(..., "--r", min=0, max=255),
    g: int = typer.Option(..., "--g", min=0, max=255),
    b: int = typer.Option(..., "--b", min=0, max=255),
) -> None:
    """Flood-fill the region around (x, y) that shares its colour."""
    with _reporting_errors():
        image = _load(input_path)
        transforms.flood_fill(image.grid, x, y, (r, g, b))
        _save(image, output)


if __name__ == "__main__":
    app()
