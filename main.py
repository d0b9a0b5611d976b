#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py seam-carve photo.ppm -o narrow.ppm -i 50 -d v
    python main.py statistics photo.ppm

Or use the module directly:

    python -m image_carver.cli --help
"""

from image_carver.cli import app

if __name__ == "__main__":
    app()
