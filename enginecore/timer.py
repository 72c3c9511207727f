"""Countdown timer driven by explicit update ticks."""

from __future__ import annotations

from typing import Callable, Optional


class Timer:
    """Counts down on each update and fires its callback once time runs out."""

    def __init__(self, callback: Optional[Callable[[], None]] = None) -> None:
        self._callback = callback
        self._running = False
        self._time_left = 0.0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def time_left(self) -> float:
        return self._time_left

    def update(self, delta: float) -> None:
        """Advance the timer by ``delta``; fire the callback when it expires."""
        if not self._running:
            return
        self._time_left -= delta
        if self._time_left <= 0:
            self._running = False
            if self._callback is None:
                raise RuntimeError("timer callback is not set")
            self._callback()

    def start(self, duration: float) -> None:
        """Start (or restart) the countdown with ``duration``."""
        self._time_left = duration
        self._running = True

    def set_callback(self, callback: Callable[[], None]) -> None:
        self._callback = callback