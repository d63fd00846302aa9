"""
Built-in reference image pair for Histogram Compare.

The comparison window opens on a "without flash" / "with flash" pair when
no images are given. Both are rendered from the same synthetic scene: the
flash shot is brighter and cooler with clipped highlights, the ambient shot
is dim and warm with crushed shadows.

Functions:
    build_reference_scene: Render the shared scene as float RGB (0.0-1.0)
    build_reference_pair: PNG buffers for the without/with flash images
"""

from io import BytesIO
from typing import Tuple

import numpy as np

from HC_Libs.constants import (
    REFERENCE_IMAGE_SIZE,
    REFERENCE_WITH_FLASH_NAME,
    REFERENCE_WITHOUT_FLASH_NAME,
)
from HC_Libs.pillow_compat import Image

# (gain, per-channel tint) applied to the shared scene
WITHOUT_FLASH_EXPOSURE = (0.45, (1.10, 0.95, 0.75))
WITH_FLASH_EXPOSURE = (1.35, (0.95, 1.00, 1.10))


def build_reference_scene(size: Tuple[int, int] = REFERENCE_IMAGE_SIZE) -> np.ndarray:
    """
    Render the shared reference scene.

    Returns:
        float array of shape (height, width, 3) with values in 0.0-1.0
    """
    width, height = size
    ys, xs = np.mgrid[0:height, 0:width]
    u = xs / max(width - 1, 1)
    v = ys / max(height - 1, 1)

    # Wall: soft diagonal gradient
    scene = np.empty((height, width, 3), dtype=np.float64)
    scene[..., 0] = 0.35 + 0.30 * u
    scene[..., 1] = 0.40 + 0.20 * (1 - v)
    scene[..., 2] = 0.45 + 0.25 * v

    # Table in the lower third
    table = v > 0.68
    scene[table] = (0.42, 0.28, 0.16)

    # Round object on the table, lit from the left
    dx, dy = u - 0.45, (v - 0.55) * (height / width)
    disc = dx ** 2 + dy ** 2 < 0.03
    shade = np.clip(0.9 - 2.5 * dx, 0.2, 1.0)
    scene[disc] = np.stack([0.85 * shade, 0.22 * shade, 0.18 * shade], axis=-1)[disc]

    return scene


def _expose(scene: np.ndarray, gain: float, tint: Tuple[float, float, float]) -> Image.Image:
    values = np.clip(scene * gain * np.asarray(tint), 0.0, 1.0)
    return Image.fromarray(np.rint(values * 255).astype(np.uint8))


def _to_png_buffer(image: Image.Image, name: str) -> BytesIO:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    buffer.seek(0)
    buffer.name = name
    return buffer


def build_reference_pair(size: Tuple[int, int] = REFERENCE_IMAGE_SIZE) -> Tuple[BytesIO, BytesIO]:
    """
    Build the default without-flash and with-flash images.

    Returns:
        (without_flash, with_flash) PNG buffers, each with a `name` attribute
    """
    scene = build_reference_scene(size)
    without_flash = _expose(scene, *WITHOUT_FLASH_EXPOSURE)
    with_flash = _expose(scene, *WITH_FLASH_EXPOSURE)
    return (
        _to_png_buffer(without_flash, REFERENCE_WITHOUT_FLASH_NAME),
        _to_png_buffer(with_flash, REFERENCE_WITH_FLASH_NAME),
    )
