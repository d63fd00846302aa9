"""
Asynchronous histogram loading for comparison slots.

Each load registers a new generation with the session, then decodes and
builds the histogram on a worker thread. Completion is handed to an optional
dispatch callable so GUI callers can apply it on their own thread; the
session's token check discards results for sources that were replaced while
decoding.

Classes:
    HistogramLoader: Submits decode jobs for session slots
"""

import concurrent.futures
import logging
from typing import Any, Callable, Optional

from HC_Libs.HistogramLib.histogram_builder import compute_histogram
from HC_Libs.HistogramLib.histogram_models import HistogramRecord
from HC_Libs.HistogramLib.pixel_sampler import DecodeError
from HC_Libs.SessionLib.comparison_session import ComparisonSession

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]
HistogramJob = Callable[[Any], HistogramRecord]


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class HistogramLoader:
    """
    Loads images into session slots without blocking the caller.

    Example:
        >>> session = ComparisonSession()
        >>> loader = HistogramLoader(session)
        >>> loader.load(0, "no_flash.jpg")
        >>> loader.load(1, "flash.jpg")
        >>> loader.shutdown()
        >>> [slot.state for slot in session.slots]
        [<SlotState.READY: 'ready'>, <SlotState.READY: 'ready'>]
    """

    def __init__(
        self,
        session: ComparisonSession,
        use_threading: bool = True,
        max_workers: Optional[int] = None,
        dispatch: Optional[Dispatch] = None,
        job: HistogramJob = compute_histogram,
    ) -> None:
        """
        Args:
            session: Session whose slots receive the results
            use_threading: Decode on a thread pool (default: True); when False
                loads run inline and are finished before load() returns
            max_workers: Maximum number of decode threads (default: None = pool default)
            dispatch: Called with a zero-argument callback that applies a
                result; defaults to calling it immediately on the worker thread
            job: Function turning a source into a HistogramRecord
        """
        self.session = session
        self.use_threading = use_threading
        self._dispatch = dispatch or _call_now
        self._job = job
        self._executor: Optional[concurrent.futures.ThreadPoolExecutor] = None
        if use_threading:
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=max_workers,
                thread_name_prefix="histogram-decode",
            )

    def load(self, index: int, source: Any) -> concurrent.futures.Future:
        """
        Start loading a source into a slot.

        Returns:
            Future resolving to the HistogramRecord (or raising the decode error)
        """
        token = self.session.begin_decode(index, source)

        if self._executor is None:
            future: concurrent.futures.Future = concurrent.futures.Future()
            try:
                future.set_result(self._job(source))
            except Exception as e:
                future.set_exception(e)
        else:
            future = self._executor.submit(self._job, source)

        future.add_done_callback(
            lambda done: self._dispatch(lambda: self._finish(index, token, done))
        )
        return future

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)

    def _finish(self, index: int, token: int, future: concurrent.futures.Future) -> None:
        error = future.exception()
        if error is None:
            self.session.apply_result(index, token, future.result())
            return

        if not isinstance(error, DecodeError):
            logger.error(
                f"Unexpected error building histogram for slot {index}",
                exc_info=(type(error), error, error.__traceback__),
            )
        self.session.apply_failure(index, token, error)
