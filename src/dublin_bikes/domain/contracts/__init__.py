"""Contracts (protocols) implemented by adapters."""

from dublin_bikes.domain.contracts.cache import CacheProtocol
from dublin_bikes.domain.contracts.station_simulator import StationSimulatorProtocol

__all__ = ["CacheProtocol", "StationSimulatorProtocol"]
