from __future__ import annotations

from unittest.mock import MagicMock, patch

from coffee_quiz.cafes.cache import (
    cache_get,
    cache_set,
    cleanup_expired,
    clear_cache,
    get_cache_stats,
    make_key,
)
from coffee_quiz.cafes.models import Cafe, CafeSearchParams, CafeSearchResult
from coffee_quiz.cafes.search import search_cafes


def _result(lat: float = 40.7128, lng: float = -74.006, n: int = 1) -> CafeSearchResult:
    cafes = [
        Cafe(
            id=f"osm-node-{i}",
            name=f"Cafe {i}",
            address="1 Main St",
            lat=lat,
            lng=lng,
            distance=10 * i,
            osm_link=f"https://www.openstreetmap.org/node/{i}",
        )
        for i in range(n)
    ]
    result = CafeSearchResult.empty(lat, lng, 2000)
    return result.model_copy(update={"cafes": cafes, "total_found": n})


def test_key_rounds_coordinates_to_three_decimals():
    assert make_key(40.71281, -74.00599, 2000) == (40.713, -74.006, 2000)


def test_cache_miss_then_hit():
    clear_cache()
    assert cache_get(40.7128, -74.006, 2000) is None
    cache_set(40.7128, -74.006, 2000, "", _result())
    assert cache_get(40.7128, -74.006, 2000) is not None
    stats = get_cache_stats()
    assert stats["misses"] == 1
    assert stats["hits"] == 1
    assert stats["hit_rate"] == 50.0


def test_nearby_coordinates_share_an_entry():
    clear_cache()
    cache_set(40.71281, -74.00601, 2000, "", _result())
    assert cache_get(40.71279, -74.00598, 2000) is not None


def test_different_radius_is_a_different_entry():
    clear_cache()
    cache_set(40.7128, -74.006, 2000, "", _result())
    assert cache_get(40.7128, -74.006, 5000) is None


def test_set_is_an_upsert():
    clear_cache()
    cache_set(40.7128, -74.006, 2000, "", _result(n=1))
    cache_set(40.7128, -74.006, 2000, "nyc", _result(n=3))
    assert get_cache_stats()["size"] == 1
    assert len(cache_get(40.7128, -74.006, 2000).cafes) == 3


def test_expired_entry_is_a_miss_and_is_removed():
    clear_cache()
    cache_set(40.7128, -74.006, 2000, "", _result())
    assert cache_get(40.7128, -74.006, 2000, ttl=-1) is None
    assert get_cache_stats()["size"] == 0


def test_cleanup_expired_removes_stale_entries():
    clear_cache()
    cache_set(1.0, 1.0, 2000, "", _result())
    cache_set(2.0, 2.0, 2000, "", _result())
    assert cleanup_expired(ttl=3600) == 0
    assert cleanup_expired(ttl=-1) == 2
    assert get_cache_stats()["size"] == 0


@patch("coffee_quiz.cafes.cache.time.time")
def test_write_sweeps_out_expired_entries(mock_time):
    clear_cache()
    mock_time.return_value = 1000.0
    for i in range(50):
        cache_set(float(i), float(i), 2000, "", _result(), ttl=3600)

    mock_time.return_value = 1000.0 + 3601
    cache_set(60.0, 60.0, 2000, "", _result(), ttl=3600)

    assert get_cache_stats()["size"] == 1
    assert cache_get(60.0, 60.0, 2000, ttl=3600) is not None


@patch("coffee_quiz.cafes.cache.time.time")
def test_write_keeps_fresh_entries(mock_time):
    clear_cache()
    mock_time.return_value = 1000.0
    cache_set(1.0, 1.0, 2000, "", _result(), ttl=3600)

    mock_time.return_value = 1000.0 + 1800
    cache_set(2.0, 2.0, 2000, "", _result(), ttl=3600)

    assert get_cache_stats()["size"] == 2


# ── Read-through search ──────────────────────────────────────────────────


@patch("coffee_quiz.cafes.search.get_active_provider")
def test_search_reads_through_cache(mock_provider_factory):
    clear_cache()
    provider = MagicMock()
    provider.name = "fake"
    provider.search_cafes.return_value = _result(n=2)
    mock_provider_factory.return_value = provider

    params = CafeSearchParams(lat=40.7128, lng=-74.006)
    first = search_cafes(params)
    second = search_cafes(params)

    assert len(first.cafes) == 2
    assert second == first
    assert provider.search_cafes.call_count == 1


@patch("coffee_quiz.cafes.search.get_active_provider")
def test_empty_results_are_not_cached(mock_provider_factory):
    clear_cache()
    provider = MagicMock()
    provider.name = "fake"
    provider.search_cafes.return_value = _result(n=0)
    mock_provider_factory.return_value = provider

    params = CafeSearchParams(lat=40.7128, lng=-74.006)
    search_cafes(params)
    search_cafes(params)

    assert provider.search_cafes.call_count == 2
    assert get_cache_stats()["size"] == 0
