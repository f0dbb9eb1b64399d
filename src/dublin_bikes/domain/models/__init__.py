"""Domain models for the station catalogue."""

from dublin_bikes.domain.models.paged_result import PagedResult
from dublin_bikes.domain.models.position import Position
from dublin_bikes.domain.models.station import Station
from dublin_bikes.domain.models.station_changes import StationDraft, StationPatch
from dublin_bikes.domain.models.station_query import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    StationQuery,
)
from dublin_bikes.domain.models.station_summary import StationSummary

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PagedResult",
    "Position",
    "Station",
    "StationDraft",
    "StationPatch",
    "StationQuery",
    "StationSummary",
]
