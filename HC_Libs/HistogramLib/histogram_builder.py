"""
Histogram building for Histogram Compare.

Reduces pixel samples into four 256-bucket count series. Bucket indices are
the raw 0-255 channel values; there is no quantization or float math.

The brightness series counts every channel value of every pixel, so each
pixel casts three votes into it. This is a per-channel intensity
distribution, not perceptual luma.

Functions:
    build_histogram: Reduce pixel samples into a HistogramRecord
    compute_histogram: Decode an image resource and build its HistogramRecord
"""

from typing import Any, Iterable, Union

import numpy as np

from HC_Libs.HistogramLib.histogram_models import HistogramRecord
from HC_Libs.HistogramLib.pixel_sampler import ImageSource, sample_pixels
from HC_Libs.constants import BIN_COUNT, MAX_CHANNEL_VALUE

SampleInput = Union[np.ndarray, Iterable[Any]]


def _as_sample_array(samples: SampleInput) -> np.ndarray:
    if isinstance(samples, np.ndarray):
        array = samples
    else:
        array = np.array(list(samples), dtype=np.int64)

    if array.size == 0:
        return np.zeros((0, 3), dtype=np.uint8)

    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError(f"Pixel samples must have shape (N, 3), got {array.shape}")

    if array.dtype != np.uint8:
        if array.min() < 0 or array.max() > MAX_CHANNEL_VALUE:
            raise ValueError(f"Channel values must be within 0-{MAX_CHANNEL_VALUE}")
        array = array.astype(np.uint8)

    return array


def _count(values: np.ndarray) -> np.ndarray:
    return np.bincount(values, minlength=BIN_COUNT)[:BIN_COUNT]


def build_histogram(samples: SampleInput) -> HistogramRecord:
    """
    Build brightness and per-channel histograms from pixel samples.

    Args:
        samples: (N, 3) array of RGB samples, or an iterable of (r, g, b)
            triples such as PixelSample tuples

    Returns:
        HistogramRecord with 256 buckets per series; all zeros for N == 0

    Raises:
        ValueError: If samples are not RGB triples or fall outside 0-255
    """
    array = _as_sample_array(samples)

    return HistogramRecord(
        brightness=_count(array.ravel()).tolist(),
        red=_count(array[:, 0]).tolist(),
        green=_count(array[:, 1]).tolist(),
        blue=_count(array[:, 2]).tolist(),
    )


def compute_histogram(source: ImageSource) -> HistogramRecord:
    """
    Decode an image resource and build its histograms.

    Raises:
        DecodeError: If the resource cannot be decoded
    """
    return build_histogram(sample_pixels(source))
