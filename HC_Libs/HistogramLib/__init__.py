"""
HistogramLib - Histogram computation and overlay rendering

This module provides pixel sampling, histogram building, shared scale
resolution and dual-overlay rendering for the Histogram Compare project.
"""

from HC_Libs.HistogramLib.histogram_models import (
    HistogramMode,
    HistogramRecord,
    PixelSample,
    RgbaColor,
    RgbColor,
)
from HC_Libs.HistogramLib.pixel_sampler import (
    DecodeError,
    get_supported_image_formats,
    is_supported_format,
    iter_pixel_samples,
    sample_pixels,
)
from HC_Libs.HistogramLib.histogram_builder import build_histogram, compute_histogram
from HC_Libs.HistogramLib.scale_resolver import max_bucket_value, resolve_scale
from HC_Libs.HistogramLib.render_surface import PillowSurface, RenderSurface
from HC_Libs.HistogramLib.overlay_renderer import render_overlay, stroke_colors
from HC_Libs.HistogramLib.reference_images import build_reference_pair, build_reference_scene

__all__ = [
    "HistogramMode",
    "HistogramRecord",
    "PixelSample",
    "RgbaColor",
    "RgbColor",
    "DecodeError",
    "get_supported_image_formats",
    "is_supported_format",
    "iter_pixel_samples",
    "sample_pixels",
    "build_histogram",
    "compute_histogram",
    "max_bucket_value",
    "resolve_scale",
    "PillowSurface",
    "RenderSurface",
    "render_overlay",
    "stroke_colors",
    "build_reference_pair",
    "build_reference_scene",
]
