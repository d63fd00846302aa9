"""
Dual histogram overlay rendering.

Draws up to two HistogramRecords onto one RenderSurface as 256 vertical
strokes each, anchored at the bottom edge. The records are shifted
horizontally in opposite directions by a fraction of the bucket width so
that coinciding bars from the two images do not hide each other. All strokes
are partially transparent.

Functions:
    stroke_colors: RGBA colors for the series drawn in a mode
    render_overlay: Clear the surface and draw every present record
"""

from typing import List, Optional, Sequence

from HC_Libs.HistogramLib.histogram_models import HistogramMode, HistogramRecord, RgbaColor
from HC_Libs.HistogramLib.render_surface import RenderSurface
from HC_Libs.HistogramLib.scale_resolver import resolve_scale
from HC_Libs.constants import (
    BIN_COUNT,
    BLUE_STROKE_COLOR,
    BRIGHTNESS_STROKE_COLOR,
    GREEN_STROKE_COLOR,
    RED_STROKE_COLOR,
    SCALE_MARGIN,
    SLOT_OFFSETS,
    STROKE_ALPHA,
)


def _with_alpha(rgb, alpha: float) -> RgbaColor:
    return (rgb[0], rgb[1], rgb[2], int(round(alpha * 255)))


def stroke_colors(mode: HistogramMode, alpha: float = STROKE_ALPHA) -> List[RgbaColor]:
    """
    Get the stroke colors for the series drawn in a mode.

    The order matches HistogramRecord.series(mode).
    """
    mode = HistogramMode.from_value(mode)
    if mode is HistogramMode.BRIGHTNESS:
        return [_with_alpha(BRIGHTNESS_STROKE_COLOR, alpha)]
    return [
        _with_alpha(RED_STROKE_COLOR, alpha),
        _with_alpha(GREEN_STROKE_COLOR, alpha),
        _with_alpha(BLUE_STROKE_COLOR, alpha),
    ]


def _draw_record(
    surface: RenderSurface,
    record: HistogramRecord,
    mode: HistogramMode,
    scale: float,
    offset: float,
    alpha: float,
) -> None:
    bucket_width = surface.width / BIN_COUNT
    bottom = surface.height

    for series, color in zip(record.series(mode), stroke_colors(mode, alpha)):
        surface.set_stroke_color(color)
        for index, count in enumerate(series):
            x = index * bucket_width + offset
            surface.move_to(x, bottom)
            surface.line_to(x, bottom - count * scale)
            surface.stroke()


def render_overlay(
    surface: RenderSurface,
    records: Sequence[Optional[HistogramRecord]],
    mode: HistogramMode,
    scale: Optional[float] = None,
    offsets: Sequence[float] = SLOT_OFFSETS,
    alpha: float = STROKE_ALPHA,
) -> bool:
    """
    Clear the surface and draw every present record on a shared scale.

    Args:
        surface: Target surface; it is fully cleared before drawing
        records: Records by slot position; None entries are skipped
        mode: Brightness (one neutral stroke per bucket) or Color (red,
            green and blue strokes per bucket)
        scale: Count-to-height factor; resolved from all present records
            when omitted
        offsets: Horizontal shift per slot position, in surface units
        alpha: Stroke opacity (0.0-1.0)

    Returns:
        True if anything was drawn, False when the scale is undefined
        (no records, or every active series is empty)

    Raises:
        ValueError: If there are more records than offsets
    """
    mode = HistogramMode.from_value(mode)
    if len(records) > len(offsets):
        raise ValueError(f"Got {len(records)} records but only {len(offsets)} slot offsets")

    surface.clear()

    if scale is None:
        scale = resolve_scale(records, mode, surface.height, SCALE_MARGIN)
    if scale is None:
        return False

    drawn = False
    for record, offset in zip(records, offsets):
        if record is None:
            continue
        _draw_record(surface, record, mode, scale, offset, alpha)
        drawn = True

    return drawn
