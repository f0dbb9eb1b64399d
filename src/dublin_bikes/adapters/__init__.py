"""Adapters layer - storage, caching, simulation and delivery integrations."""

from dublin_bikes.adapters.cache import TtlCache
from dublin_bikes.adapters.config import AppConfig
from dublin_bikes.adapters.dataset import JsonStationDatasetLoader
from dublin_bikes.adapters.memory import InMemoryStationRepository
from dublin_bikes.adapters.simulator import StationUpdateSimulator

__all__ = [
    "AppConfig",
    "InMemoryStationRepository",
    "JsonStationDatasetLoader",
    "StationUpdateSimulator",
    "TtlCache",
]
