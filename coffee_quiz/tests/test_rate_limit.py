from __future__ import annotations

from unittest.mock import patch

from coffee_quiz.cafes.rate_limit import (
    check_rate_limit,
    clear_rate_limits,
    sweep_expired_windows,
    tracked_clients,
)


def test_allows_up_to_limit_then_blocks():
    clear_rate_limits()
    assert check_rate_limit("1.2.3.4", limit=2)
    assert check_rate_limit("1.2.3.4", limit=2)
    assert not check_rate_limit("1.2.3.4", limit=2)


def test_clients_are_counted_separately():
    clear_rate_limits()
    assert check_rate_limit("1.1.1.1", limit=1)
    assert not check_rate_limit("1.1.1.1", limit=1)
    assert check_rate_limit("2.2.2.2", limit=1)


def test_window_resets():
    clear_rate_limits()
    assert check_rate_limit("1.2.3.4", limit=1, window=-1)
    assert check_rate_limit("1.2.3.4", limit=1, window=-1)


# ── Expiry sweep ─────────────────────────────────────────────────────────


def test_sweep_removes_only_expired_windows():
    clear_rate_limits()
    check_rate_limit("10.0.0.1", window=-1)
    check_rate_limit("10.0.0.2", window=-1)
    check_rate_limit("10.0.0.3", window=60)

    assert sweep_expired_windows() == 2
    assert tracked_clients() == 1


@patch("coffee_quiz.cafes.rate_limit.SWEEP_THRESHOLD", 50)
def test_many_distinct_clients_do_not_accumulate():
    clear_rate_limits()
    for i in range(100):
        check_rate_limit(f"203.0.113.{i}", window=-1)

    assert tracked_clients() <= 50


@patch("coffee_quiz.cafes.rate_limit.SWEEP_THRESHOLD", 1)
def test_sweep_keeps_active_clients_limited():
    clear_rate_limits()
    assert check_rate_limit("1.2.3.4", limit=1)
    check_rate_limit("5.6.7.8", window=-1)

    assert not check_rate_limit("1.2.3.4", limit=1)
