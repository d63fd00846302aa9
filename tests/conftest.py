"""
Pytest configuration and shared fixtures for Histogram Compare tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

from pathlib import Path

import pytest
from PIL import Image

from HC_Libs.HistogramLib.histogram_models import HistogramRecord
from surface_fakes import RecordingSurface


@pytest.fixture
def recording_surface():
    """
    Provide a RecordingSurface matching the default 512x256 canvas.
    """
    return RecordingSurface()


@pytest.fixture
def solid_image(tmp_path):
    """
    Provide a factory writing a single-color image file.

    Returns:
        Callable (color, size=(W, H), name, mode) -> Path of the saved image
    """
    def _make(color, size=(8, 4), name="solid.png", mode="RGB"):
        path = Path(tmp_path) / name
        Image.new(mode, size, color=color).save(path)
        return path

    return _make


@pytest.fixture
def peak_record():
    """
    Provide a factory for records with a single non-zero bucket per series.

    Returns:
        Callable (index, count) -> HistogramRecord where every series holds
        `count` at `index` (brightness holds 3 * count)
    """
    def _make(index, count):
        series = [0] * 256
        series[index] = count
        brightness = [0] * 256
        brightness[index] = 3 * count
        return HistogramRecord(brightness=brightness, red=series, green=series, blue=series)

    return _make
