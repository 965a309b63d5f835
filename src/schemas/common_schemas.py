"""Common schemas used across multiple API endpoints.

Provides reusable schema components for paged list responses and plain
message responses.
"""

from pydantic import BaseModel, Field

from src.domain.value_objects import Page


class PaginatedMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        page: Current page number.
        limit: Items per page.
        total: Total items matching the query.
        total_pages: Total number of pages.
    """

    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total items matching the query")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_page(cls, page: Page) -> "PaginatedMeta":
        """Create pagination metadata from a repository page."""
        return cls(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement for operations without a resource body."""

    message: str = Field(..., description="Human-readable result")
