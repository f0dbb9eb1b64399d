"""Cache adapters."""

from dublin_bikes.adapters.cache.ttl_cache import CacheEntry, TtlCache

__all__ = ["CacheEntry", "TtlCache"]
