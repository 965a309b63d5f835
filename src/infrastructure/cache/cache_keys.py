"""Cache key construction utilities.

Centralizes key patterns so writers and invalidators never disagree.

Usage:
    keys = CacheKeys()
    keys.user(user_id)  # "user:123e4567-..."
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CacheKeys:
    """Cache key construction.

    Attributes:
        prefix: Optional namespace for deployments sharing one Redis
            database. Empty by default so identity keys are ``user:<id>``.
    """

    prefix: str = ""

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    def user(self, user_id: UUID) -> str:
        """Resolved identity key.

        Pattern: [{prefix}:]user:{user_id}
        """
        return self._key(f"user:{user_id}")
