"""
Pixel sampling for Histogram Compare.

Decodes an image resource with Pillow and flattens it into RGB pixel samples
in raster order (row-major, top-to-bottom, left-to-right). Alpha is dropped;
palette and greyscale images are expanded to RGB first.

Classes:
    DecodeError: Raised when a resource cannot be loaded or decoded

Functions:
    sample_pixels: Decode a resource into an (N, 3) uint8 sample array
    iter_pixel_samples: Decode a resource and yield PixelSample tuples
    get_supported_image_formats: Extensions offered by the file dialogs
    is_supported_format: Check a path's extension against the supported set
"""

import logging
from pathlib import Path
from typing import IO, Any, Iterator, List, Union

import numpy as np

from HC_Libs.HistogramLib.histogram_models import PixelSample
from HC_Libs.constants import SUPPORTED_STANDARD_IMAGES
from HC_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, IO[bytes]]

# File filter pattern for QFileDialog
STANDARD_IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp)"


class DecodeError(IOError):
    """The image resource is unreadable, corrupt, unsupported or empty."""


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Path) -> bool:
    """
    Check if a file path has a supported image extension.

    Args:
        file_path: Path to the file

    Returns:
        True if file extension is supported
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def _describe(source: ImageSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", repr(source))


def _to_rgb(img: Any) -> Any:
    """
    Convert a decoded image to 8-bit RGB.

    Pillow's own conversion clips wide integer and float modes at 255, so
    those are rescaled first: 16-bit and 32-bit integer data (how Pillow
    opens 16-bit greyscale PNG and TIFF) keeps its high byte, and float
    data is read as 0.0-1.0.
    """
    if img.mode.startswith("I;16") or img.mode == "I":
        values = np.asarray(img).astype(np.int64)
        scaled = (np.clip(values, 0, 65535) >> 8).astype(np.uint8)
        return Image.fromarray(scaled).convert("RGB")

    if img.mode == "F":
        values = np.asarray(img, dtype=np.float64)
        scaled = np.rint(np.clip(values, 0.0, 1.0) * 255).astype(np.uint8)
        return Image.fromarray(scaled).convert("RGB")

    return img.convert("RGB")


def sample_pixels(source: ImageSource) -> np.ndarray:
    """
    Decode an image resource into RGB pixel samples.

    The decoded image is released before returning; only the flat sample
    array is kept.

    Args:
        source: File path or binary file-like object holding the image

    Returns:
        numpy uint8 array of shape (width * height, 3) in raster order

    Raises:
        DecodeError: If the resource cannot be opened or decoded, or has a
            zero width or height
    """
    label = _describe(source)

    if isinstance(source, (str, Path)) and not Path(source).is_file():
        raise DecodeError(f"Image file not found: {label}")

    try:
        with Image.open(source) as img:
            width, height = img.size
            if width == 0 or height == 0:
                raise DecodeError(f"Image has zero dimension ({width}x{height}): {label}")
            rgb = _to_rgb(img)
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError(f"Failed to decode image from {label}: {str(e)}") from e

    try:
        samples = np.asarray(rgb, dtype=np.uint8).reshape(-1, 3)
    finally:
        rgb.close()

    logger.debug(f"Sampled {samples.shape[0]} pixels ({width}x{height}) from {label}")
    return samples


def iter_pixel_samples(source: ImageSource) -> Iterator[PixelSample]:
    """
    Decode an image resource and yield its pixels as PixelSample tuples.

    Raises:
        DecodeError: Same conditions as sample_pixels
    """
    for red, green, blue in sample_pixels(source).tolist():
        yield PixelSample(red, green, blue)
