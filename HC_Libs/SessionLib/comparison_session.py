"""
Comparison session for Histogram Compare.

The session is the explicit, caller-owned state of one comparison: two image
slots and the shared histogram mode. Each slot moves through

    EMPTY -> DECODING -> READY | FAILED

and every decode request carries a generation token. A result is applied only
when its token still matches the slot's current generation, so a decode that
finishes after its source was replaced is discarded instead of overwriting
the newer record.

Classes:
    SlotState: Lifecycle state of one slot
    ImageSlot: Source, state, generation and record for one slot
    ComparisonSession: Two slots plus mode, with change listeners
"""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from HC_Libs.HistogramLib.histogram_models import HistogramMode, HistogramRecord
from HC_Libs.HistogramLib.overlay_renderer import render_overlay
from HC_Libs.HistogramLib.render_surface import RenderSurface
from HC_Libs.constants import SLOT_COUNT

logger = logging.getLogger(__name__)

SessionListener = Callable[["ComparisonSession"], None]


class SlotState(Enum):
    EMPTY = "empty"
    DECODING = "decoding"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageSlot:
    """Snapshot of one image slot.

    Attributes:
        source: Resource the slot was last asked to load (None while EMPTY)
        state: Lifecycle state
        generation: Token of the most recent decode request (0 while EMPTY)
        record: Histogram, present only in READY
        error: Failure message, present only in FAILED
    """

    source: Optional[Any] = None
    state: SlotState = SlotState.EMPTY
    generation: int = 0
    record: Optional[HistogramRecord] = None
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.state is SlotState.READY


class ComparisonSession:
    """
    State of one two-image histogram comparison.

    Slots are replaced wholesale on every transition, so readers always see a
    consistent snapshot. Listeners are called after every change that affects
    what should be drawn: a decode starting or finishing, and a mode change.

    Example:
        >>> session = ComparisonSession()
        >>> token = session.begin_decode(0, "no_flash.jpg")
        >>> session.apply_result(0, token, compute_histogram("no_flash.jpg"))
        True
        >>> session.set_mode(HistogramMode.COLOR)
        >>> session.render(surface)
        True
    """

    def __init__(self, mode: HistogramMode = HistogramMode.BRIGHTNESS) -> None:
        self._lock = threading.RLock()
        self._slots: List[ImageSlot] = [ImageSlot() for _ in range(SLOT_COUNT)]
        self._mode = HistogramMode.from_value(mode)
        self._listeners: List[SessionListener] = []

    @property
    def mode(self) -> HistogramMode:
        with self._lock:
            return self._mode

    @property
    def slots(self) -> Tuple[ImageSlot, ...]:
        with self._lock:
            return tuple(self._slots)

    def slot(self, index: int) -> ImageSlot:
        self._check_index(index)
        with self._lock:
            return self._slots[index]

    def add_listener(self, listener: SessionListener) -> None:
        if not callable(listener):
            raise ValueError(f"listener must be callable, got {type(listener)}")
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> bool:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
                return True
        return False

    def begin_decode(self, index: int, source: Any) -> int:
        """
        Start loading a new source into a slot.

        The slot's previous record is dropped immediately so the overlay
        shows only the other slot until this decode resolves.

        Returns:
            Generation token to pass to apply_result/apply_failure
        """
        self._check_index(index)
        with self._lock:
            token = self._slots[index].generation + 1
            self._slots[index] = ImageSlot(
                source=source,
                state=SlotState.DECODING,
                generation=token,
            )

        logger.debug(f"Slot {index} decoding {source} (generation {token})")
        self._notify()
        return token

    def apply_result(self, index: int, token: int, record: HistogramRecord) -> bool:
        """
        Attach a finished histogram to a slot.

        Returns:
            True if applied, False if the token is stale and the result was discarded
        """
        self._check_index(index)
        with self._lock:
            current = self._slots[index]
            if not self._is_current(current, token):
                logger.debug(
                    f"Discarding stale result for slot {index} "
                    f"(generation {token}, current {current.generation})"
                )
                return False
            self._slots[index] = replace(current, state=SlotState.READY, record=record, error=None)

        logger.debug(f"Slot {index} ready ({record.pixel_count} pixels)")
        self._notify()
        return True

    def apply_failure(self, index: int, token: int, error: Any) -> bool:
        """
        Mark a slot as failed for the given decode request.

        Returns:
            True if applied, False if the token is stale and the failure was discarded
        """
        self._check_index(index)
        with self._lock:
            current = self._slots[index]
            if not self._is_current(current, token):
                logger.debug(f"Discarding stale failure for slot {index} (generation {token})")
                return False
            self._slots[index] = replace(current, state=SlotState.FAILED, record=None, error=str(error))

        logger.warning(f"Slot {index} failed to load {current.source}: {error}")
        self._notify()
        return True

    def set_mode(self, mode: HistogramMode) -> None:
        mode = HistogramMode.from_value(mode)
        with self._lock:
            self._mode = mode
        self._notify()

    def ready_records(self) -> List[Optional[HistogramRecord]]:
        """Get records by slot position; slots that are not READY give None."""
        with self._lock:
            return [slot.record if slot.is_ready else None for slot in self._slots]

    def render(self, surface: RenderSurface) -> bool:
        """
        Redraw the whole overlay from the READY slots and the current mode.

        Returns:
            True if anything was drawn, False if the surface was only cleared
        """
        with self._lock:
            records = [slot.record if slot.is_ready else None for slot in self._slots]
            mode = self._mode
        return render_overlay(surface, records, mode)

    def _is_current(self, slot: ImageSlot, token: int) -> bool:
        return slot.state is SlotState.DECODING and slot.generation == token

    def _check_index(self, index: int) -> None:
        if not 0 <= index < SLOT_COUNT:
            raise ValueError(f"Slot index must be 0-{SLOT_COUNT - 1}, got {index}")

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(self)
