"""Cache protocol for domain layer.

Defines the key/value cache interface the application needs, without
knowing about any specific implementation. Infrastructure adapters
(RedisAdapter) implement this protocol structurally.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- No framework dependencies in domain layer
"""

from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Cache protocol - what the application needs from a key/value store.

    All operations return Result types. Callers decide whether a failure is
    fatal; the identity cache treats read failures as misses.
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        ...

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, DomainError]:
        """Get a JSON object from cache.

        Args:
            key: Cache key.

        Returns:
            Result with parsed dict, None if not found, or CacheError
            (including when the stored value is not valid JSON).
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Serialize a dict to JSON and store it.

        Args:
            key: Cache key.
            value: JSON-serializable dict.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete key from cache.

        Returns:
            Result with True if the key existed, False otherwise, or CacheError.
        """
        ...

    async def delete_many(self, keys: list[str]) -> Result[int, DomainError]:
        """Delete several keys in one round trip.

        Returns:
            Result with number of keys removed, or CacheError.
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check if key exists in cache."""
        ...

    async def ttl(self, key: str) -> Result[int | None, DomainError]:
        """Get remaining time to live in seconds.

        Returns:
            Result with seconds remaining, None if the key has no expiry or
            does not exist, or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity."""
        ...
