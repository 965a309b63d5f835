"""RoleRepository protocol (port): roles and the role side of the RBAC graph.

Implementations:
    - RoleRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities.role import Permission, Role
from src.domain.value_objects import Page, PageQuery


class RoleRepository(Protocol):
    """Protocol for role persistence and RBAC graph traversal."""

    async def roles_for_user(self, user_id: UUID) -> list[Role]:
        """Roles assigned to a user (permissions not loaded)."""
        ...

    async def permissions_for_role(self, role_id: UUID) -> list[Permission]:
        """Permissions granted by a role."""
        ...

    async def find_by_id(self, role_id: UUID) -> Role | None:
        """Role with its permissions loaded, or None."""
        ...

    async def find_by_name(self, name: str) -> Role | None:
        """Role by exact name (permissions not loaded), or None."""
        ...

    async def find_by_ids(self, role_ids: list[UUID]) -> list[Role]:
        """Roles matching the given ids. Missing ids are simply absent."""
        ...

    async def list_excluding_superuser(self) -> list[Role]:
        """All roles except the superuser sentinel, ordered by name."""
        ...

    async def list(self, query: PageQuery) -> Page[Role]:
        """Paged role listing (superuser excluded, search on name)."""
        ...

    async def create(self, name: str, permission_ids: list[UUID]) -> Role:
        """Insert a role with its permissions in one transaction."""
        ...

    async def update(
        self, role_id: UUID, name: str, permission_ids: list[UUID]
    ) -> Role:
        """Rename a role and replace its permission set (delete-then-insert)."""
        ...

    async def delete(self, role_id: UUID) -> bool:
        """Delete a role (join rows cascade). True if a row was removed."""
        ...

    async def holder_ids(self, role_id: UUID) -> list[UUID]:
        """Ids of users currently holding the role."""
        ...
