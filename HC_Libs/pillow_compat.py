"""
Single import point for the Pillow modules used by Histogram Compare.

The histogram modules need two pieces of Pillow: `Image` for decoding
source files and building the drawing surface, and `ImageDraw` for stroking
the overlay. Loading them here keeps every other module importing from one
place and gives a clear error when Pillow is missing.
"""
from importlib import import_module
from types import ModuleType


def _require(name: str) -> ModuleType:
    try:
        return import_module(name)
    except ImportError as exc:
        raise ImportError(
            f"{name} is required: install Pillow with 'pip install Pillow'"
        ) from exc


Image = _require("PIL.Image")
ImageDraw = _require("PIL.ImageDraw")
