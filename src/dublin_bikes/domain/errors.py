"""Domain errors for the station catalogue."""


class StationCatalogError(Exception):
    """Base class for all station catalogue errors."""


class DataError(StationCatalogError):
    """Raised when the initial station dataset is missing, empty or malformed."""


class ConflictError(StationCatalogError):
    """Raised when a station number is already taken or would be changed."""

    def __init__(self, number: int, message: str | None = None) -> None:
        self.number = number
        super().__init__(message or f"Station with number {number} already exists")


class NotFoundError(StationCatalogError):
    """Raised when an operation targets a station number that does not exist."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Station with number {number} not found")


class TransientError(StationCatalogError):
    """Raised when a simulator pass fails; the next pass retries."""
