"""
Read-through cache for cafe searches.

Entries are keyed on the search centre rounded to three decimals (about
110 m) plus the radius, so nearby repeat searches share an entry. Writes
are upserts and sweep out every expired entry. Expired entries also count
as misses and are dropped on read.
"""
from __future__ import annotations

import logging
import time
from typing import Any

from .config import DEFAULT_CAFE_CONFIG
from .models import CafeSearchResult

logger = logging.getLogger(__name__)

COORD_DECIMALS = 3

CacheKey = tuple[float, float, int]

_cache: dict[CacheKey, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def round_coord(coord: float, decimals: int = COORD_DECIMALS) -> float:
    return round(coord, decimals)


def make_key(lat: float, lng: float, radius: int) -> CacheKey:
    return (round_coord(lat), round_coord(lng), radius)


def _is_expired(entry: dict[str, Any], ttl: float, now: float) -> bool:
    return now - entry["created_at"] > ttl


def cache_get(
    lat: float,
    lng: float,
    radius: int,
    ttl: float = DEFAULT_CAFE_CONFIG.cache_duration,
) -> CafeSearchResult | None:
    global _hits, _misses
    key = make_key(lat, lng, radius)
    entry = _cache.get(key)
    if entry and not _is_expired(entry, ttl, time.time()):
        _hits += 1
        logger.debug("Cafe cache hit for %s", key)
        return entry["value"]
    if entry:
        del _cache[key]
    _misses += 1
    logger.debug("Cafe cache miss for %s", key)
    return None


def cache_set(
    lat: float,
    lng: float,
    radius: int,
    query: str,
    value: CafeSearchResult,
    ttl: float = DEFAULT_CAFE_CONFIG.cache_duration,
) -> None:
    removed = cleanup_expired(ttl)
    if removed:
        logger.debug("Dropped %d expired cafe cache entries", removed)
    _cache[make_key(lat, lng, radius)] = {
        "value": value,
        "query": query,
        "created_at": time.time(),
    }


def cleanup_expired(ttl: float = DEFAULT_CAFE_CONFIG.cache_duration) -> int:
    """Drop every stale entry and return how many were removed."""
    now = time.time()
    stale = [k for k, entry in _cache.items() if _is_expired(entry, ttl, now)]
    for key in stale:
        del _cache[key]
    return len(stale)


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
