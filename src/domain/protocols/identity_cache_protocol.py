"""IdentityCache protocol (port) for resolved user identities.

Read-through cache keyed by user id only. Values are the exact
UserInformation produced by the identity resolver.

Contract:
    - get() returns None on a miss. Infrastructure failures are reported
      as a miss so the resolver runs; they never grant access.
    - set() stores the identity for ``ttl_seconds`` (default configured,
      3600). Last write wins.
    - invalidate() must be called after any committed mutation of a user's
      name, email, password, status or role assignments, before the
      response for that mutation is returned.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user_information import UserInformation


class IdentityCacheError(Exception):
    """Raised when a cached identity could not be invalidated.

    Propagates to the request boundary (500); the mutation response is
    never sent while a stale identity may remain cached.
    """


class IdentityCache(Protocol):
    """Cache of resolved identities."""

    async def get(self, user_id: UUID) -> UserInformation | None:
        """Return the cached identity or None on miss."""
        ...

    async def set(
        self,
        user_id: UUID,
        info: UserInformation,
        ttl_seconds: int | None = None,
    ) -> None:
        """Store an identity for the configured TTL (or ``ttl_seconds``)."""
        ...

    async def invalidate(self, user_id: UUID) -> None:
        """Drop the cached identity for one user.

        Raises:
            IdentityCacheError: If the cache could not be updated.
        """
        ...

    async def invalidate_many(self, user_ids: list[UUID]) -> None:
        """Drop cached identities for several users (role/permission edits).

        Raises:
            IdentityCacheError: If the cache could not be updated.
        """
        ...
