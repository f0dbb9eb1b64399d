"""Station repository port."""

from typing import Protocol

from dublin_bikes.domain.models.paged_result import PagedResult
from dublin_bikes.domain.models.station import Station
from dublin_bikes.domain.models.station_changes import StationDraft, StationPatch
from dublin_bikes.domain.models.station_query import StationQuery


class StationRepository(Protocol):
    """Port for the authoritative set of stations."""

    def load(self, stations: list[Station]) -> None:
        """Replace the whole collection with the given stations."""
        ...

    def list_all(self) -> list[Station]:
        """Return a point-in-time copy of all stations."""
        ...

    def query(self, query: StationQuery) -> PagedResult[Station]:
        """Filter, search, sort and paginate stations."""
        ...

    def get(self, number: int) -> Station | None:
        """Find a station by its number."""
        ...

    def create(self, draft: StationDraft) -> Station:
        """Add a new station."""
        ...

    def update(self, number: int, patch: StationPatch) -> Station:
        """Apply a partial update to an existing station."""
        ...

    def delete(self, number: int) -> bool:
        """Remove a station, returning whether it existed."""
        ...

    def set_availability(
        self, number: int, available_bikes: int, available_bike_stands: int
    ) -> None:
        """Overwrite the availability counts of a station if it exists."""
        ...
