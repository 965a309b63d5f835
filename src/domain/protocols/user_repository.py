"""UserRepository protocol (port): the credential store.

Every lookup excludes soft-deleted users. Writes that touch several rows
(user fields plus the user's role set) commit as a single transaction.

Implementations:
    - UserRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User
from src.domain.value_objects import Page, PageQuery


class UserRepository(Protocol):
    """Protocol for user persistence operations."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a live user by id.

        Returns:
            User with ``role_ids`` populated, or None if missing or deleted.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find a live user by email (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_email(
        self, email: str, exclude_user_id: UUID | None = None
    ) -> bool:
        """Check whether a live user already owns ``email``.

        Args:
            email: Email to check (case-insensitive).
            exclude_user_id: Ignore this user (profile updates).
        """
        ...

    async def create(self, user: User, role_ids: list[UUID] | None = None) -> User:
        """Insert a user and, optionally, its role assignments atomically."""
        ...

    async def update(self, user: User) -> User:
        """Persist mutable fields of ``user`` and commit the transaction."""
        ...

    async def assign_roles(self, user_id: UUID, role_ids: list[UUID]) -> None:
        """Replace the user's full role set (delete-all then insert-all).

        Staged in the current transaction; the next ``update`` commits it
        together with the user's fields.
        """
        ...

    async def soft_delete(self, user_id: UUID) -> bool:
        """Set ``deleted_at``.

        Returns:
            True if a live user was deleted, False if none matched.
        """
        ...

    async def list(self, query: PageQuery) -> Page[User]:
        """List live users with search (name/email), sort and paging."""
        ...
