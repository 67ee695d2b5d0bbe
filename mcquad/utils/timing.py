"""Wall-clock timing helpers for run diagnostics."""

from __future__ import annotations

import time
from typing import Optional


def clock_precision() -> float:
    """Resolution in seconds of the clock used by :class:`Stopwatch`."""
    return float(time.get_clock_info("perf_counter").resolution)


class Stopwatch:
    """Measure elapsed wall-clock time from :meth:`start`."""

    def __init__(self) -> None:
        self._started: Optional[float] = None
        self._stopped: Optional[float] = None

    def start(self) -> "Stopwatch":
        self._started = time.perf_counter()
        self._stopped = None
        return self

    def stop(self) -> float:
        if self._started is None:
            raise RuntimeError("Stopwatch has not been started.")
        self._stopped = time.perf_counter()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        if self._started is None:
            return 0.0
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return end - self._started

    @property
    def precision(self) -> float:
        return clock_precision()


__all__ = ["Stopwatch", "clock_precision"]
