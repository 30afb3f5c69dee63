"""
cache.py — In-process TTL cache for compositing results.

Both successful and failed results are stored, under the same TTL, so a
broken input is not recomposited on every retry within the window.
Expired entries are treated as absent and dropped when read; clear()
drops everything. A single lock guards the map; the compute function runs
outside it so a slow composite does not block readers of other keys.

get_or_compute() is therefore not atomic per key: two threads that miss
on the same key at once both run compute(), each writes its own output
file, and the later set() wins. Requests stay correct; only work is
duplicated.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

DEFAULT_TTL = 10 * 60   # seconds


@dataclass
class CacheEntry:
    value: Any
    created_at: float
    ttl: float

    def expired(self, now: float) -> bool:
        return now - self.created_at >= self.ttl


@dataclass
class CacheStats:
    total_entries: int
    expired_entries: int


class ResultCache:
    """Thread-safe fingerprint → result map with lazy expiry."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        """Live value for key, or None. Expired entries are evicted here."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expired(self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        entry = CacheEntry(
            value=value,
            created_at=self._clock(),
            ttl=self.default_ttl if ttl is None else ttl,
        )
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Any],
        ttl: Optional[float] = None,
    ) -> Any:
        """
        Return the cached value for key, or run compute() and cache what it
        returns. Concurrent misses on one key may each run compute().
        """
        value = self.get(key)
        if value is not None:
            return value
        value = compute()
        self.set(key, value, ttl)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        now = self._clock()
        with self._lock:
            expired = sum(1 for e in self._entries.values() if e.expired(now))
            return CacheStats(total_entries=len(self._entries), expired_entries=expired)
