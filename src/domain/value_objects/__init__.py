"""Domain value objects."""

from src.domain.value_objects.pagination import Page, PageQuery, SortDirection

__all__ = [
    "Page",
    "PageQuery",
    "SortDirection",
]
