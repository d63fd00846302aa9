"""
Shared vertical scale for the histogram overlay.

Both slots are drawn on one scale so their bars are directly comparable even
when the two images have very different pixel counts. The scale is derived
from the tallest single bucket across the active series of every available
record, and is recomputed on every render pass because the brightness and
color maxima differ.

Functions:
    max_bucket_value: Tallest bucket across the active series of the given records
    resolve_scale: Count-to-height multiplier, or None when there is nothing to draw
"""

from typing import Optional, Sequence

from HC_Libs.HistogramLib.histogram_models import HistogramMode, HistogramRecord
from HC_Libs.constants import SCALE_MARGIN


def max_bucket_value(
    records: Sequence[Optional[HistogramRecord]],
    mode: HistogramMode,
) -> int:
    """
    Get the tallest bucket across the active series of all present records.

    Missing records (None) contribute nothing.
    """
    mode = HistogramMode.from_value(mode)
    present = [record for record in records if record is not None]
    if not present:
        return 0
    return max(record.max_bucket(mode) for record in present)


def resolve_scale(
    records: Sequence[Optional[HistogramRecord]],
    mode: HistogramMode,
    height: float,
    margin: float = SCALE_MARGIN,
) -> Optional[float]:
    """
    Resolve the factor converting a bucket count to a drawn height.

    Args:
        records: One or two records; None marks a slot with no histogram yet
        mode: Which series participate (brightness alone, or red+green+blue)
        height: Drawable height of the surface
        margin: Band kept free at the top so the tallest bar never touches the edge

    Returns:
        (height - margin) / max_bucket_value, or None when every active
        series is empty or no record is present (draw-skip)

    Raises:
        ValueError: If height does not leave room above the margin
    """
    if height <= margin:
        raise ValueError(f"height ({height}) must be greater than margin ({margin})")

    peak = max_bucket_value(records, mode)
    if peak == 0:
        return None

    return (height - margin) / peak
