"""Loader for the static JSON station dataset."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from dublin_bikes.domain.errors import DataError
from dublin_bikes.domain.models import Position, Station

logger = logging.getLogger(__name__)


class PositionRecord(BaseModel):
    """Coordinates as stored in the dataset."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class StationRecord(BaseModel):
    """One station as stored in the dataset."""

    number: int
    contract_name: str = "dublin"
    name: str
    address: str
    position: PositionRecord
    banking: bool = False
    bonus: bool = False
    bike_stands: int = Field(ge=1)
    available_bike_stands: int = Field(ge=0)
    available_bikes: int = Field(ge=0)
    status: str
    last_update: int | None = Field(default=None, description="Epoch milliseconds")

    def to_station(self) -> Station:
        """Convert to the domain model."""
        if self.last_update is None:
            last_update = datetime.now(UTC)
        else:
            last_update = datetime.fromtimestamp(self.last_update / 1000, UTC)
        return Station(
            number=self.number,
            name=self.name,
            address=self.address,
            position=Position(lat=self.position.lat, lng=self.position.lng),
            bike_stands=self.bike_stands,
            available_bikes=self.available_bikes,
            available_bike_stands=self.available_bike_stands,
            status=self.status,
            last_update=last_update,
            contract_name=self.contract_name,
            banking=self.banking,
            bonus=self.bonus,
        )


_RECORDS_ADAPTER = TypeAdapter(list[StationRecord])


def _lowercase_keys(value: Any) -> Any:
    """Recursively lowercase dict keys so field matching ignores case."""
    if isinstance(value, dict):
        return {str(k).lower(): _lowercase_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_lowercase_keys(v) for v in value]
    return value


def parse_stations(raw: str) -> list[Station]:
    """Parse dataset JSON text into stations.

    Raises:
        DataError: If the text is not valid JSON, not a list of valid station
            records, or an empty list.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataError(f"Station dataset is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DataError("Station dataset must be a JSON list of stations")

    try:
        records = _RECORDS_ADAPTER.validate_python(_lowercase_keys(data))
    except ValidationError as e:
        raise DataError(f"Station dataset has invalid records: {e}") from e

    if not records:
        raise DataError("No stations found in dataset")

    return [record.to_station() for record in records]


class JsonStationDatasetLoader:
    """Reads station records from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the dataset path."""
        self.path = Path(path)

    def load(self) -> list[Station]:
        """Read and parse the dataset.

        Raises:
            DataError: If the file is missing, unreadable or malformed.
        """
        if not self.path.exists():
            raise DataError(f"Station dataset not found at {self.path}")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise DataError(f"Could not read station dataset at {self.path}: {e}") from e

        stations = parse_stations(raw)
        logger.info(f"Read {len(stations)} stations from {self.path}")
        return stations
