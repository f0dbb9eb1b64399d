"""Tests for the JSON station dataset loader."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from dublin_bikes.adapters.config.app_config import DEFAULT_DATASET_PATH
from dublin_bikes.adapters.dataset import JsonStationDatasetLoader, parse_stations
from dublin_bikes.domain.errors import DataError


def _record(number: int = 42, **overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "number": number,
        "contract_name": "dublin",
        "name": "SMITHFIELD NORTH",
        "address": "Smithfield North",
        "position": {"lat": 53.349562, "lng": -6.278198},
        "banking": False,
        "bonus": False,
        "bike_stands": 30,
        "available_bike_stands": 25,
        "available_bikes": 5,
        "status": "OPEN",
        "last_update": 1729065138000,
    }
    record.update(overrides)
    return record


def test_parse_converts_records_to_stations() -> None:
    """Given a valid record, when parsing, then a station with UTC last_update is built."""
    stations = parse_stations(json.dumps([_record()]))

    assert len(stations) == 1
    station = stations[0]
    assert station.number == 42
    assert station.position.lat == 53.349562
    assert station.available_bike_stands == 25
    assert station.last_update == datetime(2024, 10, 16, 7, 52, 18, tzinfo=UTC)
    assert station.contract_name == "dublin"


def test_parse_matches_field_names_ignoring_case() -> None:
    """Given upper-case keys, when parsing, then fields still match."""
    record = {key.upper(): value for key, value in _record().items()}
    record["POSITION"] = {"LAT": 53.0, "LNG": -6.0}

    stations = parse_stations(json.dumps([record]))

    assert stations[0].name == "SMITHFIELD NORTH"
    assert stations[0].position.lng == -6.0


def test_parse_defaults_missing_last_update_to_now() -> None:
    """Given a record without last_update, when parsing, then now is used."""
    record = _record()
    del record["last_update"]
    before = datetime.now(UTC)

    station = parse_stations(json.dumps([record]))[0]

    assert station.last_update >= before


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("{not json", "not valid JSON"),
        ('{"number": 1}', "must be a JSON list"),
        ("[]", "No stations found"),
        (json.dumps([{"number": 1}]), "invalid records"),
        (json.dumps([_record(available_bikes=-1)]), "invalid records"),
        (json.dumps([_record(bike_stands=0)]), "invalid records"),
    ],
)
def test_parse_rejects_bad_datasets(raw: str, message: str) -> None:
    """Given a malformed dataset, when parsing, then a DataError explains why."""
    with pytest.raises(DataError, match=message):
        parse_stations(raw)


def test_loader_reads_file(tmp_path: Path) -> None:
    """Given a dataset file, when loading, then its stations are returned."""
    path = tmp_path / "stations.json"
    path.write_text(json.dumps([_record(1), _record(2)]), encoding="utf-8")

    stations = JsonStationDatasetLoader(path).load()

    assert [s.number for s in stations] == [1, 2]


def test_loader_missing_file_raises_data_error(tmp_path: Path) -> None:
    """Given no file at the path, when loading, then a DataError is raised."""
    with pytest.raises(DataError, match="not found"):
        JsonStationDatasetLoader(tmp_path / "missing.json").load()


def test_bundled_dataset_loads() -> None:
    """Given the bundled dataset, when loading, then all twelve stations parse."""
    stations = JsonStationDatasetLoader(DEFAULT_DATASET_PATH).load()

    assert len(stations) == 12
    assert len({s.number for s in stations}) == 12
    assert sum(1 for s in stations if s.status == "CLOSED") == 2
