"""Time-bounded in-memory cache for directory lookups."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from neighborfit.config.settings import CACHE_TTL_SECONDS


@dataclass
class CacheEntry:
    value: Any
    created_at: float


class TimedCache:
    """A dict with a freshness window.

    One instance is created per application and handed to whatever performs
    lookups. Access to the underlying map is serialized with a lock since
    overlapping searches may read and write it from different threads.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry and self._clock() - entry.created_at < self.ttl_seconds:
                self.hits += 1
                return entry.value
            if entry:
                del self._entries[key]
            self.misses += 1
            return None

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, created_at=self._clock())

    def get_or_fetch(self, key: str, fetcher: Callable[[], Any]) -> Any:
        """
        Return a fresh cached value or call fetcher and cache its result.

        Exceptions from fetcher propagate and nothing is cached. The fetch
        itself runs outside the lock, so two concurrent misses may both fetch.
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        value = fetcher()
        self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict:
        total = self.hits + self.misses
        return {
            "size": len(self),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
        }
