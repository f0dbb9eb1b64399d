"""In-memory station repository."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

from dublin_bikes.domain.errors import ConflictError, DataError, NotFoundError
from dublin_bikes.domain.models import (
    PagedResult,
    Position,
    Station,
    StationDraft,
    StationPatch,
    StationQuery,
)
from dublin_bikes.domain.ports import StationRepository
from dublin_bikes.domain.query_pipeline import run_query

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class InMemoryStationRepository(StationRepository):
    """Volatile, process-local store for all stations.

    Every operation runs under one lock covering the whole collection, so no
    caller can observe a half-applied write. Stations are immutable, which
    makes everything handed out safe to use after the lock is released.
    """

    def __init__(self, clock: Clock = _utc_now) -> None:
        """Initialize an empty repository.

        Args:
            clock: Source of the current UTC time for ``last_update`` stamps.
        """
        self._clock = clock
        self._lock = threading.Lock()
        self._stations: dict[int, Station] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._stations)

    def _stamp(self, previous: datetime | None = None) -> datetime:
        now = self._clock()
        if previous is not None and previous > now:
            return previous
        return now

    def load(self, stations: list[Station]) -> None:
        """Replace the whole collection atomically.

        Raises:
            DataError: If ``stations`` is empty or contains duplicate numbers.
        """
        if not stations:
            raise DataError("No stations found in dataset")

        by_number: dict[int, Station] = {}
        for station in stations:
            if station.number in by_number:
                raise DataError(f"Duplicate station number {station.number} in dataset")
            by_number[station.number] = station

        with self._lock:
            self._stations = by_number
        logger.info(f"Loaded {len(by_number)} stations")

    def list_all(self) -> list[Station]:
        """Return a point-in-time copy of all stations in insertion order."""
        with self._lock:
            return list(self._stations.values())

    def query(self, query: StationQuery) -> PagedResult[Station]:
        """Run the query pipeline against a consistent snapshot."""
        with self._lock:
            return run_query(list(self._stations.values()), query)

    def get(self, number: int) -> Station | None:
        """Find a station by number."""
        with self._lock:
            return self._stations.get(number)

    def create(self, draft: StationDraft) -> Station:
        """Add a new station built from ``draft``.

        Available stands default to ``bike_stands - available_bikes`` when the
        draft does not set them.

        Raises:
            ConflictError: If the number is already taken.
        """
        available_stands = draft.available_bike_stands
        if available_stands is None:
            available_stands = draft.bike_stands - draft.available_bikes

        with self._lock:
            if draft.number in self._stations:
                logger.warning(f"Station {draft.number} already exists")
                raise ConflictError(draft.number)

            station = Station(
                number=draft.number,
                name=draft.name,
                address=draft.address,
                position=Position(lat=draft.latitude, lng=draft.longitude),
                bike_stands=draft.bike_stands,
                available_bikes=draft.available_bikes,
                available_bike_stands=available_stands,
                status=draft.status,
                last_update=self._stamp(),
            )
            self._stations[station.number] = station

        logger.info(f"Created new station: {station.number} - {station.name}")
        return station

    def update(self, number: int, patch: StationPatch) -> Station:
        """Apply the fields set in ``patch`` and refresh ``last_update``.

        Raises:
            NotFoundError: If no station has this number.
            ConflictError: If the patch carries a different station number.
        """
        changes = patch.model_dump(exclude_none=True, exclude={"number"})

        with self._lock:
            current = self._stations.get(number)
            if current is None:
                logger.warning(f"Station {number} not found for update")
                raise NotFoundError(number)

            if patch.number is not None and patch.number != number:
                logger.warning(f"Refusing to change number of station {number} to {patch.number}")
                raise ConflictError(
                    patch.number,
                    f"Station number {number} cannot be changed to {patch.number}",
                )

            latitude = changes.pop("latitude", current.position.lat)
            longitude = changes.pop("longitude", current.position.lng)
            updated = replace(
                current,
                **changes,
                position=Position(lat=latitude, lng=longitude),
                last_update=self._stamp(current.last_update),
            )
            self._stations[number] = updated

        logger.info(f"Updated station: {updated.number} - {updated.name}")
        return updated

    def delete(self, number: int) -> bool:
        """Remove a station; returns False if it was not there."""
        with self._lock:
            station = self._stations.pop(number, None)

        if station is None:
            logger.warning(f"Station {number} not found for deletion")
            return False

        logger.info(f"Deleted station: {station.number} - {station.name}")
        return True

    def set_availability(
        self, number: int, available_bikes: int, available_bike_stands: int
    ) -> None:
        """Overwrite availability counts; silently ignores unknown numbers."""
        with self._lock:
            current = self._stations.get(number)
            if current is None:
                return
            self._stations[number] = replace(
                current,
                available_bikes=available_bikes,
                available_bike_stands=available_bike_stands,
                last_update=self._stamp(current.last_update),
            )
