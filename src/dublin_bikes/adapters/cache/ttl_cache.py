"""Time-to-live cache for query results."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeVar

from dublin_bikes.domain.contracts.cache import CacheProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the monotonic time at which it expires."""

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check whether the entry has passed its expiry time."""
        return now >= self.expires_at


class TtlCache(CacheProtocol):
    """Thread-safe in-memory cache with per-entry expiry.

    Expired entries are evicted lazily when they are read. Internal failures
    are logged and turn into cache misses, never into stale values.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Monotonic clock in seconds used to compute expiry.
        """
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}
        self._generation = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str, value_type: type[T]) -> T | None:
        """Get a live value for ``key``.

        Args:
            key: The cache key.
            value_type: Expected type of the value; a mismatch counts as a miss.

        Returns:
            The cached value, or None on a miss.
        """
        try:
            with self._lock:
                entry = self._entries.get(key)
                if entry is None:
                    logger.debug(f"Cache miss for key: {key}")
                    return None
                if entry.is_expired(self._clock()):
                    del self._entries[key]
                    logger.debug(f"Cache entry expired for key: {key}")
                    return None
        except Exception:
            logger.exception(f"Cache lookup failed for key: {key}, treating as miss")
            return None

        if not isinstance(entry.value, value_type):
            logger.warning(
                f"Cache entry for key {key} is {type(entry.value).__name__}, "
                f"expected {value_type.__name__}; treating as miss"
            )
            return None

        logger.debug(f"Cache hit for key: {key}")
        return entry.value

    @property
    def generation(self) -> int:
        """Counter that every ``clear()`` advances."""
        with self._lock:
            return self._generation

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        self._store(key, value, ttl, generation=None)

    def set_if_generation(self, key: str, value: Any, ttl: timedelta, generation: int) -> bool:
        """Store ``value`` only if the cache was not cleared since ``generation`` was read.

        Callers read ``generation`` before computing a value, so a result
        computed from data that changed meanwhile is never cached.

        Returns:
            True if the value was stored.
        """
        return self._store(key, value, ttl, generation)

    def _store(self, key: str, value: Any, ttl: timedelta, generation: int | None) -> bool:
        try:
            entry = CacheEntry(key=key, value=value, expires_at=self._clock() + ttl.total_seconds())
            with self._lock:
                outdated = generation is not None and generation != self._generation
                if not outdated:
                    self._entries[key] = entry
        except Exception:
            logger.exception(f"Cache set failed for key: {key}")
            self.remove(key)
            return False

        if outdated:
            logger.debug(f"Cache set skipped for key: {key}, cache was cleared since read")
            return False
        logger.debug(f"Cache set for key: {key}, expires in {ttl.total_seconds():.0f} seconds")
        return True

    def remove(self, key: str) -> None:
        """Evict the entry for ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)
        logger.debug(f"Cache removed for key: {key}")

    def clear(self) -> None:
        """Evict every entry."""
        with self._lock:
            count = len(self._entries)
            self._entries = {}
            self._generation += 1
        logger.info(f"Cache cleared ({count} entries)")
