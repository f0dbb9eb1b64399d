"""Domain layer - core business logic and models."""

from dublin_bikes.domain.errors import (
    ConflictError,
    DataError,
    NotFoundError,
    StationCatalogError,
    TransientError,
)
from dublin_bikes.domain.models import (
    PagedResult,
    Position,
    Station,
    StationDraft,
    StationPatch,
    StationQuery,
    StationSummary,
)
from dublin_bikes.domain.ports import StationCatalog, StationRepository

__all__ = [
    "ConflictError",
    "DataError",
    "NotFoundError",
    "PagedResult",
    "Position",
    "Station",
    "StationCatalog",
    "StationCatalogError",
    "StationDraft",
    "StationPatch",
    "StationQuery",
    "StationRepository",
    "StationSummary",
    "TransientError",
]
