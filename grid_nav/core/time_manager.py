"""Tick timing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Drive fixed-rate ticks for per-frame updates such as path following."""

    def __init__(self, tick_rate: float = 30.0) -> None:
        if tick_rate <= 0:
            raise ValueError("tick_rate must be positive")
        self.tick_rate: float = tick_rate
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def delta(self) -> float:
        """Simulated seconds covered by one tick."""
        return 1.0 / self.tick_rate

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def sleep_until_next_tick(self) -> None:
        """Block until the next tick should occur."""

        interval = self.delta
        target = self._last_tick + interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_tick = target
        else:
            # We're behind schedule; start from current time
            self._last_tick = now
        self.tick_counter += 1


__all__ = ["TimeManager"]
