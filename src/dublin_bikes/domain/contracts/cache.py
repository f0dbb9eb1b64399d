"""Protocol for key/value caching with expiry."""

from datetime import timedelta
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class CacheProtocol(Protocol):
    """Protocol for a time-to-live cache keyed by opaque strings."""

    def get(self, key: str, value_type: type[T]) -> T | None:
        """Get a live cached value of the expected type.

        Args:
            key: The cache key.
            value_type: Type the caller expects the value to have.

        Returns:
            The cached value, or None on a miss.
        """
        ...

    @property
    def generation(self) -> int:
        """Counter that every ``clear()`` advances."""
        ...

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        """Store a value that expires after ``ttl``."""
        ...

    def set_if_generation(self, key: str, value: Any, ttl: timedelta, generation: int) -> bool:
        """Store a value only if the cache was not cleared since ``generation`` was read.

        Returns:
            True if the value was stored.
        """
        ...

    def remove(self, key: str) -> None:
        """Evict a single entry."""
        ...

    def clear(self) -> None:
        """Evict every entry."""
        ...
