"""In-memory storage adapters."""

from dublin_bikes.adapters.memory.in_memory_station_repository import (
    InMemoryStationRepository,
)

__all__ = ["InMemoryStationRepository"]
