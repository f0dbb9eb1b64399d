"""Station query domain model."""

from dataclasses import dataclass, replace

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class StationQuery:
    """Filter, search, sort and paging parameters for listing stations."""

    status: str | None = None
    min_bikes: int | None = None
    search: str | None = None
    sort: str | None = None
    direction: str | None = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def normalized(self) -> "StationQuery":
        """Return a copy with paging clamped and blank text parameters dropped."""
        sort = _blank_to_none(self.sort)
        direction = _blank_to_none(self.direction)
        return replace(
            self,
            status=_blank_to_none(self.status),
            search=_blank_to_none(self.search),
            sort=sort.lower() if sort else None,
            direction=direction.lower() if direction else None,
            page=max(1, self.page),
            page_size=min(max(1, self.page_size), MAX_PAGE_SIZE),
        )

    @property
    def descending(self) -> bool:
        """Whether results are sorted in descending order."""
        return (self.direction or "").lower() == "desc"

    def cache_key(self) -> str:
        """Deterministic cache key covering the full query signature."""
        q = self.normalized()

        def part(value: object) -> str:
            return "" if value is None else str(value)

        return (
            f"stations_{part(q.status)}_{part(q.min_bikes)}_{part(q.search)}"
            f"_{part(q.sort)}_{part(q.direction)}_{q.page}_{q.page_size}"
        )
