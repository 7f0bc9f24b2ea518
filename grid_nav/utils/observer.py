"""Runtime observability helpers."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 tick durations in seconds
_TICK_HISTORY_LEN = 1000
_tick_durations: Deque[float] = deque(maxlen=_TICK_HISTORY_LEN)

# Recent events logged without an explicit destination
_EVENT_HISTORY_LEN = 1000
_events: Deque[Dict[str, Any]] = deque(maxlen=_EVENT_HISTORY_LEN)


def record_tick(duration: float) -> None:
    """Append a tick ``duration`` in seconds to the rolling history."""

    _tick_durations.append(duration)


def average_fps() -> float:
    """Return ticks per second over the recorded history (0.0 if empty)."""

    if not _tick_durations:
        return 0.0
    avg = sum(_tick_durations) / len(_tick_durations)
    return 1.0 / avg if avg > 0 else float("inf")


def install_tick_observer(tm: Any) -> None:
    """Wrap ``tm.sleep_until_next_tick`` to record tick durations."""

    if tm is None or hasattr(tm, "_observer_wrapped"):
        return

    original = tm.sleep_until_next_tick
    last = time.perf_counter()

    def wrapper() -> None:
        nonlocal last
        original()
        now = time.perf_counter()
        record_tick(now - last)
        last = now

    tm.sleep_until_next_tick = wrapper  # type: ignore[assignment]
    setattr(tm, "_observer_wrapped", True)


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


def recent_events() -> List[Dict[str, Any]]:
    return list(_events)


__all__ = [
    "record_tick",
    "average_fps",
    "install_tick_observer",
    "log_event",
    "recent_events",
    "_tick_durations",
    "_events",
]
