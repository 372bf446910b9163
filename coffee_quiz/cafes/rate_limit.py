from __future__ import annotations

import time
from typing import Any

from .config import DEFAULT_CAFE_CONFIG

# Expired windows are swept once this many clients are tracked.
SWEEP_THRESHOLD = 1000

_windows: dict[str, dict[str, Any]] = {}


def sweep_expired_windows(now: float | None = None) -> int:
    """Forget every client whose window has ended and return how many."""
    now = time.time() if now is None else now
    stale = [client for client, entry in _windows.items() if now > entry["reset_at"]]
    for client in stale:
        del _windows[client]
    return len(stale)


def check_rate_limit(
    client_id: str,
    limit: int = DEFAULT_CAFE_CONFIG.rate_limit,
    window: float = DEFAULT_CAFE_CONFIG.rate_window,
) -> bool:
    """Fixed-window counter. Returns ``False`` once *client_id* is over *limit*."""
    now = time.time()
    if len(_windows) >= SWEEP_THRESHOLD:
        sweep_expired_windows(now)

    entry = _windows.get(client_id)
    if entry is None or now > entry["reset_at"]:
        _windows[client_id] = {"count": 1, "reset_at": now + window}
        return True
    if entry["count"] >= limit:
        return False
    entry["count"] += 1
    return True


def tracked_clients() -> int:
    return len(_windows)


def clear_rate_limits() -> None:
    _windows.clear()
