"""Elapsed-time tracking for a game in progress."""

from __future__ import annotations

import time
from typing import Callable


class GameClock:
    """Counts seconds while running; frozen while paused."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._start_time: float = now()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._now() - self._start_time)
        return self._elapsed_banked

    @property
    def elapsed_seconds(self) -> int:
        return int(self.elapsed_time)

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._now() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._now()
            self._running = True

    def reset(self) -> None:
        """Back to zero and running."""
        self._elapsed_banked = 0.0
        self._start_time = self._now()
        self._running = True
