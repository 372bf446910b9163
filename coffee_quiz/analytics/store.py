from __future__ import annotations

import time
from enum import Enum
from typing import Any


class EventType(str, Enum):
    quiz_start = "quiz_start"
    quiz_complete = "quiz_complete"
    recommendation_view = "recommendation_view"
    cafe_search = "cafe_search"
    share_link_created = "share_link_created"
    share_link_viewed = "share_link_viewed"


_events: list[dict[str, Any]] = []


def record_event(event_type: EventType | str, data: dict[str, Any] | None = None) -> None:
    _events.append({
        **(data or {}),
        "type": EventType(event_type).value,
        "timestamp": time.time(),
    })


def get_events(since: float | None = None) -> list[dict[str, Any]]:
    """Return recorded events, optionally only those at or after *since*."""
    if since is None:
        return list(_events)
    return [e for e in _events if e["timestamp"] >= since]


def clear_events() -> None:
    _events.clear()
