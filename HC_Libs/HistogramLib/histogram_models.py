"""
Histogram data models for Histogram Compare.

This module defines the core data structures shared by the sampler, builder,
scale resolver and renderer.

Classes:
    PixelSample: One decoded pixel as (red, green, blue), alpha dropped
    HistogramMode: Which bucket series the overlay draws
    HistogramRecord: Immutable brightness/red/green/blue bucket counts for one image

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple, Union

from HC_Libs.constants import BIN_COUNT, MODE_VALUE_BRIGHTNESS, MODE_VALUE_COLOR

RgbColor = Tuple[int, int, int]
RgbaColor = Tuple[int, int, int, int]


class PixelSample(NamedTuple):
    red: int
    green: int
    blue: int


class HistogramMode(Enum):
    """Series selection shared by both slots of a comparison."""

    BRIGHTNESS = MODE_VALUE_BRIGHTNESS
    COLOR = MODE_VALUE_COLOR

    @classmethod
    def from_value(cls, value: Union["HistogramMode", str]) -> "HistogramMode":
        """
        Resolve a mode from the enum itself, its value ("value"/"color") or its name.

        Raises:
            ValueError: If value does not name a mode
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip()
        for mode in cls:
            if text.lower() in (mode.value, mode.name.lower()):
                return mode

        valid = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown histogram mode '{value}'. Valid modes: {valid}")


def _freeze_series(name: str, values: Sequence[int]) -> Tuple[int, ...]:
    series = tuple(int(v) for v in values)
    if len(series) != BIN_COUNT:
        raise ValueError(f"{name} must have {BIN_COUNT} buckets, got {len(series)}")
    if any(v < 0 for v in series):
        raise ValueError(f"{name} bucket counts must be non-negative")
    return series


@dataclass(frozen=True)
class HistogramRecord:
    """Bucket counts for one decoded image.

    Each pixel casts one vote per channel into `brightness` (so the brightness
    series sums to three times the pixel count) and one vote into each of
    `red`, `green` and `blue`.

    Records are never mutated; a new image produces a new record.
    """

    brightness: Tuple[int, ...]
    red: Tuple[int, ...]
    green: Tuple[int, ...]
    blue: Tuple[int, ...]

    def __post_init__(self):
        for name in ("brightness", "red", "green", "blue"):
            object.__setattr__(self, name, _freeze_series(name, getattr(self, name)))

    @classmethod
    def empty(cls) -> "HistogramRecord":
        zeros = (0,) * BIN_COUNT
        return cls(brightness=zeros, red=zeros, green=zeros, blue=zeros)

    @property
    def pixel_count(self) -> int:
        return sum(self.red)

    def series(self, mode: HistogramMode) -> List[Tuple[int, ...]]:
        """Return the series drawn in the given mode."""
        mode = HistogramMode.from_value(mode)
        if mode is HistogramMode.BRIGHTNESS:
            return [self.brightness]
        return [self.red, self.green, self.blue]

    def max_bucket(self, mode: HistogramMode) -> int:
        return max(max(series) for series in self.series(mode))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation with plain lists."""
        return {
            "brightness": list(self.brightness),
            "red": list(self.red),
            "green": list(self.green),
            "blue": list(self.blue),
        }
