"""Station domain model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from dublin_bikes.domain.models.position import Position


@dataclass(frozen=True)
class Station:
    """Represents a bike-share station and its current availability.

    Instances are immutable; the repository swaps in a new instance on every
    mutation, so a station handed to a caller never changes under it.
    """

    number: int
    name: str
    address: str
    position: Position
    bike_stands: int
    available_bikes: int
    available_bike_stands: int
    status: str
    last_update: datetime = field(default_factory=lambda: datetime.now(UTC))
    contract_name: str = "dublin"
    banking: bool = False
    bonus: bool = False

    @property
    def occupancy(self) -> float:
        """Percentage of stands holding an available bike, rounded to 2 decimals."""
        if self.bike_stands == 0:
            return 0.0
        return round(self.available_bikes / self.bike_stands * 100, 2)

    @property
    def last_update_epoch_ms(self) -> int:
        """Last update as milliseconds since the Unix epoch."""
        return int(self.last_update.timestamp() * 1000)
