"""Dataset adapters."""

from dublin_bikes.adapters.dataset.json_station_loader import (
    JsonStationDatasetLoader,
    parse_stations,
)

__all__ = ["JsonStationDatasetLoader", "parse_stations"]
