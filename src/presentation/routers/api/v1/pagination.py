"""Query-string paging parameters shared by the settings list endpoints."""

from typing import Annotated

from fastapi import Query

from src.domain.value_objects import PageQuery, SortDirection


async def get_page_query(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 10,
    search: Annotated[
        str | None, Query(max_length=255, description="Case-insensitive filter")
    ] = None,
    sort: Annotated[str, Query(max_length=64, description="Sort column")] = "created_at",
    sort_direction: Annotated[
        SortDirection, Query(description="Sort order")
    ] = SortDirection.ASC,
) -> PageQuery:
    """Collect paging parameters into a PageQuery."""
    return PageQuery(
        page=page,
        limit=limit,
        search=search.strip() or None if search else None,
        sort=sort,
        sort_direction=sort_direction,
    )
