"""Station summary domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StationSummary:
    """Aggregate statistics over every station in the catalogue."""

    total_stations: int
    total_bike_stands: int
    total_available_bikes: int
    total_available_bike_stands: int
    counts_by_status: dict[str, int] = field(default_factory=dict)
    average_occupancy: float = 0.0
