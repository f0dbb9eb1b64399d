"""JSON response schemas for the HTTP API."""

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dublin_bikes.domain.models import PagedResult, Station, StationSummary


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class StationResponse(_CamelModel):
    """A station as returned to API clients."""

    number: int
    name: str
    address: str
    latitude: float
    longitude: float
    bike_stands: int
    available_bikes: int
    available_bike_stands: int
    status: str
    occupancy: float
    last_update_local: datetime
    last_update_epoch: int

    @classmethod
    def from_station(cls, station: Station, zone: ZoneInfo) -> "StationResponse":
        """Build the response for ``station`` with local time in ``zone``."""
        return cls(
            number=station.number,
            name=station.name,
            address=station.address,
            latitude=station.position.lat,
            longitude=station.position.lng,
            bike_stands=station.bike_stands,
            available_bikes=station.available_bikes,
            available_bike_stands=station.available_bike_stands,
            status=station.status,
            occupancy=station.occupancy,
            last_update_local=station.last_update.astimezone(zone),
            last_update_epoch=station.last_update_epoch_ms,
        )


class PagedStationsResponse(_CamelModel):
    """One page of stations plus paging metadata."""

    data: list[StationResponse]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def from_result(cls, result: PagedResult[Station], zone: ZoneInfo) -> "PagedStationsResponse":
        """Build the response for a paged query result."""
        return cls(
            data=[StationResponse.from_station(s, zone) for s in result.items],
            page=result.page,
            page_size=result.page_size,
            total_count=result.total_count,
            total_pages=result.total_pages,
            has_previous=result.has_previous,
            has_next=result.has_next,
        )


class StationsSummaryResponse(_CamelModel):
    """Aggregate statistics over all stations."""

    total_stations: int
    total_bike_stands: int
    total_available_bikes: int
    total_available_bike_stands: int
    stations_by_status: dict[str, int]
    average_occupancy: float

    @classmethod
    def from_summary(cls, summary: StationSummary) -> "StationsSummaryResponse":
        """Build the response for a catalogue summary."""
        return cls(
            total_stations=summary.total_stations,
            total_bike_stands=summary.total_bike_stands,
            total_available_bikes=summary.total_available_bikes,
            total_available_bike_stands=summary.total_available_bike_stands,
            stations_by_status=dict(summary.counts_by_status),
            average_occupancy=summary.average_occupancy,
        )
