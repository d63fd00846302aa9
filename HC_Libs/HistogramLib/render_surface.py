"""
Drawing surfaces for the histogram overlay.

The renderer only needs a handful of primitives: clear the area, set the
stroke color, and stroke a path built from move-to/line-to. `RenderSurface`
names that contract; `PillowSurface` implements it on a Pillow image so the
result can be shown in the viewer or saved by the caller.
"""

import math
from io import BytesIO
from typing import Any, List, Protocol, Tuple

from HC_Libs.HistogramLib.histogram_models import RgbColor, RgbaColor
from HC_Libs.constants import (
    BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    STROKE_WIDTH,
)
from HC_Libs.pillow_compat import Image, ImageDraw

Point = Tuple[float, float]


class RenderSurface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...

    def set_stroke_color(self, color: RgbaColor) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...


class PillowSurface:
    """
    Fixed-size drawing surface backed by an RGB Pillow image.

    Strokes are drawn through an RGBA ImageDraw, so partially transparent
    colors blend with what is already on the surface. Fractional
    coordinates are floored to the pixel grid, and x is clamped to the
    surface so edge buckets stay visible.

    Example:
        >>> surface = PillowSurface(512, 256)
        >>> surface.set_stroke_color((0, 0, 0, 128))
        >>> surface.move_to(10, 256)
        >>> surface.line_to(10, 100)
        >>> surface.stroke()
        >>> surface.to_image().save("histogram.png")
    """

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        background: RgbColor = BACKGROUND_COLOR,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self.background = tuple(background)
        self._image = Image.new("RGB", (self.width, self.height), self.background)
        self._draw = ImageDraw.Draw(self._image, "RGBA")
        self._stroke_color: RgbaColor = (0, 0, 0, 255)
        self._path: List[Point] = []

    def clear(self) -> None:
        self._draw.rectangle(
            [0, 0, self.width - 1, self.height - 1],
            fill=self.background + (255,),
        )
        self._path = []

    def set_stroke_color(self, color: RgbaColor) -> None:
        if len(color) == 3:
            color = tuple(color) + (255,)
        self._stroke_color = tuple(int(c) for c in color)

    def move_to(self, x: float, y: float) -> None:
        self._path = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        if not self._path:
            self._path = [(x, y)]
            return
        self._path.append((x, y))

    def stroke(self) -> None:
        if len(self._path) < 2:
            self._path = []
            return

        # Strokes just past the left or right edge land on the edge column
        points = [
            (min(max(math.floor(x), 0), self.width - 1), math.floor(y))
            for x, y in self._path
        ]
        self._draw.line(points, fill=self._stroke_color, width=STROKE_WIDTH)
        self._path = []

    def pixel(self, x: int, y: int) -> RgbColor:
        return self._image.getpixel((x, y))

    def to_image(self) -> Any:
        """Return a copy of the surface as a PIL Image."""
        return self._image.copy()

    def to_png_bytes(self) -> bytes:
        buffer = BytesIO()
        self._image.save(buffer, format="PNG")
        return buffer.getvalue()
