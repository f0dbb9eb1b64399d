"""Application services (use cases) for the station catalogue."""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from dublin_bikes.application.summary import summarize_stations
from dublin_bikes.domain.models import (
    PagedResult,
    Station,
    StationDraft,
    StationPatch,
    StationQuery,
    StationSummary,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from dublin_bikes.domain.contracts import CacheProtocol
    from dublin_bikes.domain.ports import StationRepository

SUMMARY_CACHE_KEY = "stations_summary"
DEFAULT_CACHE_TTL = timedelta(minutes=5)


def station_cache_key(number: int) -> str:
    """Cache key for a single station lookup."""
    return f"station_{number}"


class StationCatalogService:
    """Cache-fronted reads and cache-invalidating writes over the station repository.

    A read only populates the cache if no write cleared it while the read ran.
    """

    def __init__(
        self,
        station_repository: "StationRepository",
        cache: "CacheProtocol",
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
    ) -> None:
        """Initialize with a repository, a cache and the TTL for cached reads."""
        self._station_repository = station_repository
        self._cache = cache
        self._cache_ttl = cache_ttl

    def list_stations(self, query: StationQuery) -> PagedResult[Station]:
        """Get one page of stations matching ``query``."""
        key = query.cache_key()
        cached = self._cache.get(key, PagedResult)
        if cached is not None:
            logger.debug(f"Returning cached result for {key}")
            return cached

        generation = self._cache.generation
        result = self._station_repository.query(query)
        self._cache.set_if_generation(key, result, self._cache_ttl, generation)
        return result

    def get_station(self, number: int) -> Station | None:
        """Get a single station by number, or None if it does not exist."""
        key = station_cache_key(number)
        cached = self._cache.get(key, Station)
        if cached is not None:
            logger.debug(f"Returning cached result for station {number}")
            return cached

        generation = self._cache.generation
        station = self._station_repository.get(number)
        if station is None:
            logger.warning(f"Station {number} not found")
            return None

        self._cache.set_if_generation(key, station, self._cache_ttl, generation)
        return station

    def summary(self) -> StationSummary:
        """Get aggregate statistics, computed fresh from a full snapshot on a cache miss."""
        cached = self._cache.get(SUMMARY_CACHE_KEY, StationSummary)
        if cached is not None:
            logger.debug("Returning cached station summary")
            return cached

        generation = self._cache.generation
        summary = summarize_stations(self._station_repository.list_all())
        self._cache.set_if_generation(SUMMARY_CACHE_KEY, summary, self._cache_ttl, generation)
        return summary

    def create_station(self, draft: StationDraft) -> Station:
        """Create a station and invalidate every cached read.

        Raises:
            ConflictError: If the station number is already taken.
        """
        station = self._station_repository.create(draft)
        self._cache.clear()
        return station

    def update_station(self, number: int, patch: StationPatch) -> Station:
        """Update a station and invalidate every cached read.

        Raises:
            NotFoundError: If no station has this number.
            ConflictError: If the patch tries to change the station number.
        """
        station = self._station_repository.update(number, patch)
        self._cache.clear()
        return station

    def delete_station(self, number: int) -> bool:
        """Delete a station; returns False if it did not exist."""
        deleted = self._station_repository.delete(number)
        if deleted:
            self._cache.clear()
        return deleted
