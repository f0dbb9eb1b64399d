"""Aggregate statistics over the station catalogue."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from dublin_bikes.domain.models import Station, StationSummary


def summarize_stations(stations: Sequence[Station]) -> StationSummary:
    """Compute the catalogue summary from a full snapshot of stations.

    Average occupancy only counts stations with at least one stand and is
    0.0 when there are none.
    """
    with_stands = [s.occupancy for s in stations if s.bike_stands > 0]
    average = round(sum(with_stands) / len(with_stands), 2) if with_stands else 0.0

    return StationSummary(
        total_stations=len(stations),
        total_bike_stands=sum(s.bike_stands for s in stations),
        total_available_bikes=sum(s.available_bikes for s in stations),
        total_available_bike_stands=sum(s.available_bike_stands for s in stations),
        counts_by_status=dict(Counter(s.status for s in stations)),
        average_occupancy=average,
    )
