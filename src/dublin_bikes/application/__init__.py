"""Application layer - use cases over the domain."""

from dublin_bikes.application.services import StationCatalogService
from dublin_bikes.application.summary import summarize_stations

__all__ = ["StationCatalogService", "summarize_stations"]
