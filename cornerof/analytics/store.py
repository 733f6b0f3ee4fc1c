from __future__ import annotations

import time
from collections import deque
from typing import Any

# Oldest suggestion events are dropped once the log is full
MAX_EVENTS = 10_000

_events: deque[dict[str, Any]] = deque(maxlen=MAX_EVENTS)


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({
        "type": event_type,
        "timestamp": time.time(),
        **data,
    })


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    """Recorded events, oldest first, optionally only those of ``event_type``."""
    return [e for e in _events if event_type is None or e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
