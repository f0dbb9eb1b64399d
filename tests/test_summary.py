"""Tests for catalogue summary statistics."""

from dublin_bikes.application.summary import summarize_stations
from dublin_bikes.domain.models import Station
from tests.helpers import make_station


def test_summary_totals_for_scenario(scenario_stations: list[Station]) -> None:
    """Given the three scenario stations, when summarizing, then totals add up."""
    summary = summarize_stations(scenario_stations)

    assert summary.total_stations == 3
    assert summary.total_bike_stands == 75
    assert summary.total_available_bikes == 15
    assert summary.total_available_bike_stands == 60
    assert summary.counts_by_status == {"OPEN": 2, "CLOSED": 1}


def test_summary_average_occupancy(scenario_stations: list[Station]) -> None:
    """Given occupancies 25, 33.33 and 0, when summarizing, then the mean is 19.44."""
    summary = summarize_stations(scenario_stations)

    assert summary.average_occupancy == 19.44


def test_summary_skips_stations_without_stands_in_average() -> None:
    """Given a station with no stands, when summarizing, then it is left out of the average."""
    stations = [
        make_station(1, bike_stands=10, available_bikes=5),
        make_station(2, bike_stands=0, available_bikes=0),
    ]

    summary = summarize_stations(stations)

    assert summary.average_occupancy == 50.0
    assert summary.total_stations == 2


def test_summary_of_nothing_is_zero() -> None:
    """Given no stations, when summarizing, then every figure is zero."""
    summary = summarize_stations([])

    assert summary.total_stations == 0
    assert summary.counts_by_status == {}
    assert summary.average_occupancy == 0.0
