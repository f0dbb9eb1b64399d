"""Tests for the station query pipeline."""

import pytest

from dublin_bikes.domain.models import Station, StationQuery
from dublin_bikes.domain.query_pipeline import (
    filter_by_min_bikes,
    filter_by_status,
    paginate,
    run_query,
    search_stations,
    sort_stations,
)
from tests.helpers import make_station


def _numbers(stations: list[Station]) -> list[int]:
    return [s.number for s in stations]


def test_status_filter_keeps_open_stations(scenario_stations: list[Station]) -> None:
    """Given two open and one closed station, when filtering OPEN, then two remain."""
    result = run_query(scenario_stations, StationQuery(status="OPEN"))

    assert result.total_count == 2
    assert _numbers(result.items) == [1, 2]


def test_status_filter_ignores_case(scenario_stations: list[Station]) -> None:
    """Given status 'closed', when filtering, then the CLOSED station matches."""
    assert _numbers(filter_by_status(scenario_stations, "closed")) == [3]


def test_min_bikes_filter_is_inclusive(scenario_stations: list[Station]) -> None:
    """Given min bikes 8, when filtering, then only station 2 with 10 bikes remains."""
    assert _numbers(filter_by_min_bikes(scenario_stations, 8)) == [2]
    assert _numbers(filter_by_min_bikes(scenario_stations, 10)) == [2]
    assert _numbers(filter_by_min_bikes(scenario_stations, 0)) == [1, 2, 3]


def test_search_matches_name_or_address_ignoring_case(
    scenario_stations: list[Station],
) -> None:
    """Given search text, when searching, then name and address both match case-insensitively."""
    assert _numbers(search_stations(scenario_stations, "CLOSED")) == [3]
    assert _numbers(search_stations(scenario_stations, "closed address")) == [3]
    assert _numbers(search_stations(scenario_stations, "test address 2")) == [2]
    assert search_stations(scenario_stations, "nowhere") == []


def test_sort_by_name_ascending(scenario_stations: list[Station]) -> None:
    """Given sort=name asc, when querying, then CLOSED STATION comes first."""
    result = run_query(scenario_stations, StationQuery(sort="name", direction="asc"))

    assert [s.name for s in result.items] == [
        "CLOSED STATION",
        "TEST STATION 1",
        "TEST STATION 2",
    ]


def test_sort_by_name_ignores_case() -> None:
    """Given mixed-case names, when sorting by name, then order ignores case."""
    stations = [make_station(1, "beta"), make_station(2, "Alpha"), make_station(3, "GAMMA")]

    assert _numbers(sort_stations(stations, "name")) == [2, 1, 3]


def test_sort_by_available_bikes_descending(scenario_stations: list[Station]) -> None:
    """Given sort=availableBikes desc, when querying, then the fullest station is first."""
    result = run_query(
        scenario_stations, StationQuery(sort="availableBikes", direction="desc")
    )

    assert _numbers(result.items) == [2, 1, 3]


def test_sort_by_occupancy(scenario_stations: list[Station]) -> None:
    """Given sort=occupancy, when querying, then stations are ordered by bikes per stand."""
    result = run_query(scenario_stations, StationQuery(sort="occupancy"))

    assert _numbers(result.items) == [3, 1, 2]


@pytest.mark.parametrize("sort", [None, "unknown", ""])
def test_missing_or_unknown_sort_orders_by_number(sort: str | None) -> None:
    """Given no usable sort key, when querying, then stations come back by number ascending."""
    stations = [make_station(7), make_station(2), make_station(5)]

    result = run_query(stations, StationQuery(sort=sort, direction="desc"))

    assert _numbers(result.items) == [2, 5, 7]


def test_first_page_metadata(scenario_stations: list[Station]) -> None:
    """Given three stations and page size 2, when reading page 1, then metadata is correct."""
    result = run_query(scenario_stations, StationQuery(page=1, page_size=2))

    assert len(result.items) == 2
    assert result.total_count == 3
    assert result.total_pages == 2
    assert result.has_next is True
    assert result.has_previous is False


def test_pages_partition_the_filtered_results() -> None:
    """Given many stations, when reading every page, then pages are disjoint and complete."""
    stations = [make_station(n) for n in range(1, 24)]
    seen: list[int] = []

    for page in range(1, 4):
        result = run_query(stations, StationQuery(page=page, page_size=10))
        seen.extend(_numbers(result.items))

    assert sorted(seen) == list(range(1, 24))
    assert len(seen) == len(set(seen))


def test_page_beyond_end_is_empty_with_real_totals(scenario_stations: list[Station]) -> None:
    """Given a page past the end, when querying, then items are empty but totals are kept."""
    result = run_query(scenario_stations, StationQuery(page=5, page_size=2))

    assert result.items == []
    assert result.total_count == 3
    assert result.total_pages == 2
    assert result.has_previous is True
    assert result.has_next is False


def test_no_matches_gives_zero_pages(scenario_stations: list[Station]) -> None:
    """Given a search with no matches, when querying, then there are zero pages."""
    result = run_query(scenario_stations, StationQuery(search="zzz"))

    assert result.items == []
    assert result.total_count == 0
    assert result.total_pages == 0
    assert result.has_next is False


def test_out_of_range_paging_is_clamped(scenario_stations: list[Station]) -> None:
    """Given page 0 and page size 0, when querying, then page 1 with size 1 is returned."""
    result = run_query(scenario_stations, StationQuery(page=0, page_size=0))

    assert result.page == 1
    assert result.page_size == 1
    assert result.total_pages == 3
    assert _numbers(result.items) == [1]


def test_filters_compose(scenario_stations: list[Station]) -> None:
    """Given status, min bikes and search together, when querying, then all apply."""
    result = run_query(
        scenario_stations, StationQuery(status="OPEN", min_bikes=1, search="station 1")
    )

    assert _numbers(result.items) == [1]


def test_paginate_exact_multiple() -> None:
    """Given four stations and page size 2, when paginating page 2, then there is no next page."""
    stations = [make_station(n) for n in range(1, 5)]

    result = paginate(stations, page=2, page_size=2)

    assert _numbers(result.items) == [3, 4]
    assert result.total_pages == 2
    assert result.has_next is False
