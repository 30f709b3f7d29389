"""Simple in-memory TTL cache used for sentiment results and finished analyses."""

import hashlib
import threading
import time
from typing import Any

from ..config import settings


class InMemoryCache:
    """
    Thread-safe in-memory cache with TTL support.

    Expired entries are swept on writes at most once per ``purge_interval``
    seconds. With ``max_entries`` set, the oldest entries are evicted first
    once the cache is full.
    """

    def __init__(self, default_ttl: int = 3600, max_entries: int | None = None, purge_interval: int = 60):
        """Initialize cache with default TTL in seconds."""
        self._cache: dict[str, tuple[Any, float]] = {}  # key mapping to (value, expiry_time), oldest first
        self._default_ttl = default_ttl
        self._max_entries = max_entries
        self._purge_interval = purge_interval
        self._next_purge = 0.0
        self._lock = threading.Lock()

    def __is_expired(self, expiry_time: float, now: float | None = None) -> bool:
        return (time.time() if now is None else now) > expiry_time

    def __purge_expired(self, now: float) -> None:
        expired = [key for key, (_, expiry_time) in self._cache.items() if self.__is_expired(expiry_time, now)]
        for key in expired:
            del self._cache[key]
        self._next_purge = now + self._purge_interval

    def get(self, key: str) -> Any | None:
        """Get value from cache if not expired."""
        with self._lock:
            if key not in self._cache:
                return None

            value, expiry_time = self._cache[key]

            if self.__is_expired(expiry_time):
                del self._cache[key]
                return None

            return value

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Set value in cache with TTL."""
        if ttl is None:
            ttl = self._default_ttl

        now = time.time()
        with self._lock:
            if now >= self._next_purge:
                self.__purge_expired(now)

            # re-insert so overwritten keys move to the newest position
            self._cache.pop(key, None)
            self._cache[key] = (value, now + ttl)

            if self._max_entries is not None:
                while len(self._cache) > self._max_entries:
                    del self._cache[next(iter(self._cache))]

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        """Number of live entries."""
        with self._lock:
            self.__purge_expired(time.time())
            return len(self._cache)

    @staticmethod
    def create_key(text: str) -> str:
        """Create a cache key from text content."""
        return hashlib.md5(text.encode("utf-8")).hexdigest()


# Global cache instances
sentiment_cache = InMemoryCache(
    default_ttl=settings.cache_ttl_seconds, max_entries=settings.cache_max_entries
)
analysis_store = InMemoryCache(
    default_ttl=settings.analysis_ttl_seconds, max_entries=settings.analysis_max_entries
)
