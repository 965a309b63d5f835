"""Pagination value objects for list queries.

PageQuery carries the datatable-style parameters accepted by the settings
list endpoints; Page is what repositories return.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import ceil
from typing import Generic, TypeVar

T = TypeVar("T")


class SortDirection(str, Enum):
    """Sort order for list queries."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, kw_only=True)
class PageQuery:
    """Paging, search and sort parameters.

    Attributes:
        page: 1-based page number.
        limit: Page size.
        search: Optional case-insensitive substring filter.
        sort: Column to sort by. Repositories fall back to created_at for
            columns they do not allow.
        sort_direction: Sort order.
    """

    page: int = 1
    limit: int = 10
    search: str | None = None
    sort: str = "created_at"
    sort_direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        """Row offset for the requested page."""
        return (max(self.page, 1) - 1) * self.limit


@dataclass(frozen=True, kw_only=True)
class Page(Generic[T]):
    """One page of results plus totals."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        """Number of pages for the current total and limit."""
        if self.limit <= 0:
            return 0
        return ceil(self.total / self.limit)
