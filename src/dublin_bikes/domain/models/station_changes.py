"""Write payloads for creating and updating stations."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StationDraft(BaseModel):
    """Fields required to create a new station."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int
    name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=200)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    bike_stands: int = Field(ge=1, le=100, alias="bikeStands")
    available_bikes: int = Field(default=0, ge=0, le=100, alias="availableBikes")
    available_bike_stands: int | None = Field(
        default=None, ge=0, le=100, alias="availableBikeStands"
    )
    status: str = "OPEN"

    @model_validator(mode="after")
    def check_bikes_fit_stands(self) -> Self:
        """Reject more bikes than stands when free stands are derived from the difference."""
        if self.available_bike_stands is None and self.available_bikes > self.bike_stands:
            raise ValueError(
                f"available_bikes ({self.available_bikes}) cannot exceed "
                f"bike_stands ({self.bike_stands})"
            )
        return self


class StationPatch(BaseModel):
    """Partial update for an existing station; only fields that are set are applied."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)
    address: str | None = Field(default=None, min_length=1, max_length=200)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    bike_stands: int | None = Field(default=None, ge=1, le=100, alias="bikeStands")
    available_bikes: int | None = Field(default=None, ge=0, le=100, alias="availableBikes")
    available_bike_stands: int | None = Field(
        default=None, ge=0, le=100, alias="availableBikeStands"
    )
    status: str | None = None
