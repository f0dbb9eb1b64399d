"""Query pipeline over a snapshot of stations.

The steps always run in the same order: filter by status, filter by minimum
available bikes, search, sort, paginate. Every function here is pure; the
repository hands in a snapshot and gets back a new page.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from dublin_bikes.domain.models import PagedResult, Station, StationQuery

SortKey = Callable[[Station], Any]

_SORT_KEYS: dict[str, SortKey] = {
    "name": lambda station: station.name.casefold(),
    "availablebikes": lambda station: station.available_bikes,
    "available_bikes": lambda station: station.available_bikes,
    "occupancy": lambda station: station.occupancy,
}


def filter_by_status(stations: Iterable[Station], status: str | None) -> list[Station]:
    """Keep stations whose status matches case-insensitively."""
    if not status:
        return list(stations)
    wanted = status.casefold()
    return [s for s in stations if s.status.casefold() == wanted]


def filter_by_min_bikes(stations: Iterable[Station], min_bikes: int | None) -> list[Station]:
    """Keep stations with at least ``min_bikes`` available bikes."""
    if min_bikes is None:
        return list(stations)
    return [s for s in stations if s.available_bikes >= min_bikes]


def search_stations(stations: Iterable[Station], text: str | None) -> list[Station]:
    """Keep stations whose name or address contains ``text``, ignoring case."""
    if not text:
        return list(stations)
    needle = text.casefold()
    return [s for s in stations if needle in s.name.casefold() or needle in s.address.casefold()]


def sort_stations(
    stations: Iterable[Station], sort: str | None, descending: bool = False
) -> list[Station]:
    """Sort stations by name, available bikes or occupancy.

    Unknown or missing keys sort by station number, ascending.
    """
    key = _SORT_KEYS.get((sort or "").lower())
    if key is None:
        return sorted(stations, key=lambda station: station.number)
    return sorted(stations, key=key, reverse=descending)


def paginate(stations: Sequence[Station], page: int, page_size: int) -> PagedResult[Station]:
    """Slice one page out of ``stations`` and compute the paging metadata."""
    total_count = len(stations)
    total_pages = math.ceil(total_count / page_size)
    offset = (page - 1) * page_size
    return PagedResult(
        items=list(stations[offset : offset + page_size]),
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_previous=page > 1,
        has_next=page < total_pages,
    )


def run_query(stations: Sequence[Station], query: StationQuery) -> PagedResult[Station]:
    """Run the full pipeline for ``query`` over ``stations``."""
    q = query.normalized()
    result = filter_by_status(stations, q.status)
    result = filter_by_min_bikes(result, q.min_bikes)
    result = search_stations(result, q.search)
    result = sort_stations(result, q.sort, q.descending)
    return paginate(result, q.page, q.page_size)
