"""Paged result domain model."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of query results plus count metadata for the whole result set."""

    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous: bool
    has_next: bool
