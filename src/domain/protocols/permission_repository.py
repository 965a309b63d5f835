"""PermissionRepository protocol (port).

Implementations:
    - PermissionRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Permission
from src.domain.value_objects import Page, PageQuery


class PermissionRepository(Protocol):
    """Protocol for permission persistence operations."""

    async def find_by_id(self, permission_id: UUID) -> Permission | None:
        """Permission by id, or None."""
        ...

    async def find_by_ids(self, permission_ids: list[UUID]) -> list[Permission]:
        """Permissions matching the given ids. Missing ids are simply absent."""
        ...

    async def find_by_names(self, names: list[str]) -> list[Permission]:
        """Permissions whose name is in ``names``."""
        ...

    async def list_all(self) -> list[Permission]:
        """Every permission ordered by group then name."""
        ...

    async def list(self, query: PageQuery) -> Page[Permission]:
        """Paged listing with search on name or group."""
        ...

    async def create_many(self, group: str, names: list[str]) -> list[Permission]:
        """Insert several permissions of one group in one transaction."""
        ...

    async def update(self, permission_id: UUID, name: str, group: str) -> Permission:
        """Rename or regroup a permission."""
        ...

    async def delete(self, permission_id: UUID) -> bool:
        """Delete a permission (join rows cascade). True if a row was removed."""
        ...

    async def holder_ids(self, permission_id: UUID) -> list[UUID]:
        """Ids of users holding the permission through any role."""
        ...
