"""Position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Geographical coordinates of a station."""

    lat: float
    lng: float
