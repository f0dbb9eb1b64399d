"""Shared fixtures for station catalogue tests."""

import pytest

from dublin_bikes.adapters.memory import InMemoryStationRepository
from dublin_bikes.domain.models import Station
from tests.helpers import make_station


@pytest.fixture
def scenario_stations() -> list[Station]:
    """Two open stations with 5 and 10 bikes and one closed station with none."""
    return [
        make_station(1, "TEST STATION 1", "Test Address 1", bike_stands=20, available_bikes=5),
        make_station(2, "TEST STATION 2", "Test Address 2", bike_stands=30, available_bikes=10),
        make_station(
            3,
            "CLOSED STATION",
            "Closed Address",
            bike_stands=25,
            available_bikes=0,
            status="CLOSED",
        ),
    ]


@pytest.fixture
def repository(scenario_stations: list[Station]) -> InMemoryStationRepository:
    """Repository loaded with the scenario stations."""
    repo = InMemoryStationRepository()
    repo.load(scenario_stations)
    return repo
