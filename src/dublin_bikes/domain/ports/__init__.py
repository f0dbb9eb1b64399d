"""Ports (interfaces) for the ports-and-adapters architecture."""

from dublin_bikes.domain.ports.station_catalog import StationCatalog
from dublin_bikes.domain.ports.station_repository import StationRepository

__all__ = ["StationCatalog", "StationRepository"]
