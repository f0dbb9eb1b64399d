"""Station catalogue port consumed by delivery adapters."""

from typing import Protocol

from dublin_bikes.domain.models.paged_result import PagedResult
from dublin_bikes.domain.models.station import Station
from dublin_bikes.domain.models.station_changes import StationDraft, StationPatch
from dublin_bikes.domain.models.station_query import StationQuery
from dublin_bikes.domain.models.station_summary import StationSummary


class StationCatalog(Protocol):
    """Port for reading and changing the station catalogue."""

    def list_stations(self, query: StationQuery) -> PagedResult[Station]:
        """Get one page of stations matching the query."""
        ...

    def get_station(self, number: int) -> Station | None:
        """Get a single station by number."""
        ...

    def summary(self) -> StationSummary:
        """Get aggregate statistics for all stations."""
        ...

    def create_station(self, draft: StationDraft) -> Station:
        """Create a station."""
        ...

    def update_station(self, number: int, patch: StationPatch) -> Station:
        """Update a station."""
        ...

    def delete_station(self, number: int) -> bool:
        """Delete a station."""
        ...
