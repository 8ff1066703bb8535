"""Tests for the time-bounded lookup cache."""

import pytest

from neighborfit.utils.cache import TimedCache


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TimedCache(ttl_seconds=1800, clock=clock)


def test_miss_returns_none(cache):
    assert cache.get("missing") is None
    assert cache.misses == 1


def test_set_then_get(cache):
    cache.set("neighborhoods_Delhi_20", ["a"])
    assert cache.get("neighborhoods_Delhi_20") == ["a"]
    assert cache.hits == 1


def test_entry_expires_after_ttl(cache, clock):
    cache.set("key", "value")
    clock.now = 1799
    assert cache.get("key") == "value"
    clock.now = 1800
    assert cache.get("key") is None
    assert len(cache) == 0


def test_get_or_fetch_calls_fetcher_once_while_fresh(cache):
    calls = []

    def fetch():
        calls.append(1)
        return ["hit"]

    assert cache.get_or_fetch("key", fetch) == ["hit"]
    assert cache.get_or_fetch("key", fetch) == ["hit"]
    assert len(calls) == 1


def test_get_or_fetch_refetches_after_expiry(cache, clock):
    values = iter(["first", "second"])
    assert cache.get_or_fetch("key", lambda: next(values)) == "first"
    clock.now = 3600
    assert cache.get_or_fetch("key", lambda: next(values)) == "second"


def test_empty_list_is_cached(cache):
    calls = []

    def fetch():
        calls.append(1)
        return []

    cache.get_or_fetch("key", fetch)
    cache.get_or_fetch("key", fetch)
    assert len(calls) == 1


def test_fetch_error_propagates_and_is_not_cached(cache):
    def boom():
        raise RuntimeError("service down")

    with pytest.raises(RuntimeError):
        cache.get_or_fetch("key", boom)
    assert len(cache) == 0
    assert cache.get_or_fetch("key", lambda: "ok") == "ok"


def test_clear_and_stats(cache):
    cache.set("a", 1)
    cache.get("a")
    cache.get("b")
    stats = cache.stats()
    assert stats == {"size": 1, "hits": 1, "misses": 1, "hit_rate": 50.0}

    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
