"""
SessionLib - Comparison state and asynchronous loading

This module holds the two-slot comparison session and the loader that
decodes images into it off the calling thread.
"""

from HC_Libs.SessionLib.comparison_session import ComparisonSession, ImageSlot, SlotState
from HC_Libs.SessionLib.histogram_loader import HistogramLoader

__all__ = [
    "ComparisonSession",
    "ImageSlot",
    "SlotState",
    "HistogramLoader",
]
