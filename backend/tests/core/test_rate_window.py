"""Fixed-Window Rate Counter - tests for per-source request budgets.

Tests cover:
    - Requests up to the limit are allowed, the next is rejected
    - Window rolls over after window_seconds
    - Sources are counted independently
    - remaining / reset_after_seconds reported correctly
    - prune drops only expired windows
"""

import pytest

from employee_registry.core.rate_window import FixedWindowCounter


def test_allows_up_to_limit_then_rejects():
    counter = FixedWindowCounter(max_requests=3, window_seconds=60)
    decisions = [counter.hit("1.2.3.4", now=0.0) for _ in range(4)]
    assert [d.allowed for d in decisions] == [True, True, True, False]


def test_remaining_counts_down_to_zero():
    counter = FixedWindowCounter(max_requests=2, window_seconds=60)
    assert counter.hit("a", now=0.0).remaining == 1
    assert counter.hit("a", now=1.0).remaining == 0
    assert counter.hit("a", now=2.0).remaining == 0


def test_reset_after_measured_from_window_start():
    counter = FixedWindowCounter(max_requests=5, window_seconds=900)
    counter.hit("a", now=100.0)
    decision = counter.hit("a", now=160.5)
    assert decision.reset_after_seconds == 840
    assert decision.limit == 5


def test_window_rolls_over():
    counter = FixedWindowCounter(max_requests=1, window_seconds=10)
    assert counter.hit("a", now=0.0).allowed
    assert not counter.hit("a", now=9.9).allowed
    assert counter.hit("a", now=10.0).allowed


def test_sources_counted_independently():
    counter = FixedWindowCounter(max_requests=1, window_seconds=60)
    assert counter.hit("a", now=0.0).allowed
    assert counter.hit("b", now=0.0).allowed
    assert not counter.hit("a", now=1.0).allowed


def test_rejected_requests_still_count():
    counter = FixedWindowCounter(max_requests=1, window_seconds=60)
    counter.hit("a", now=0.0)
    counter.hit("a", now=1.0)
    # still the same window: no fresh budget until it expires
    assert not counter.hit("a", now=59.0).allowed


def test_prune_drops_only_expired_windows():
    counter = FixedWindowCounter(max_requests=1, window_seconds=10)
    counter.hit("old", now=0.0)
    counter.hit("new", now=5.0)
    counter.prune(now=12.0)
    assert len(counter) == 1
    assert not counter.hit("new", now=12.0).allowed


def test_reset_clears_all_windows():
    counter = FixedWindowCounter(max_requests=1, window_seconds=60)
    counter.hit("a", now=0.0)
    counter.reset()
    assert len(counter) == 0
    assert counter.hit("a", now=1.0).allowed


@pytest.mark.parametrize("max_requests,window", [(0, 10), (5, 0)])
def test_rejects_non_positive_settings(max_requests, window):
    with pytest.raises(ValueError):
        FixedWindowCounter(max_requests=max_requests, window_seconds=window)
