"""Builders shared across station catalogue tests."""

from datetime import UTC, datetime

from dublin_bikes.domain.models import Position, Station

FIXED_TIME = datetime(2024, 10, 16, 7, 52, 18, tzinfo=UTC)


def make_station(
    number: int,
    name: str = "TEST STATION",
    address: str = "Test Address",
    bike_stands: int = 20,
    available_bikes: int = 5,
    available_bike_stands: int | None = None,
    status: str = "OPEN",
    last_update: datetime = FIXED_TIME,
) -> Station:
    """Build a station with sensible defaults."""
    if available_bike_stands is None:
        available_bike_stands = bike_stands - available_bikes
    return Station(
        number=number,
        name=name,
        address=address,
        position=Position(lat=53.34, lng=-6.26),
        bike_stands=bike_stands,
        available_bikes=available_bikes,
        available_bike_stands=available_bike_stands,
        status=status,
        last_update=last_update,
    )


class FakeClock:
    """Manually advanced clock returning floats (monotonic) or datetimes."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
