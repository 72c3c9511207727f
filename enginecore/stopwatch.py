"""Millisecond stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Stopwatch:
    """Measures elapsed time in milliseconds since the last start."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def start(self) -> None:
        """Restart the measurement from now."""
        self._start = self._clock()

    def stop(self) -> float:
        """Return milliseconds elapsed since the last start; does not reset."""
        return (self._clock() - self._start) * 1000.0