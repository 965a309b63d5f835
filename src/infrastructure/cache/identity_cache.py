"""Redis implementation of IdentityCache protocol.

Key Pattern:
    - user:{user_id} -> JSON serialized UserInformation

Architecture:
    - Implements IdentityCache protocol (structural typing)
    - Uses RedisAdapter (CacheProtocol) for low-level operations
    - Reads fail open to a miss: the resolver then rebuilds the identity
      from the database, so a cache outage never grants access
    - Invalidation failures raise IdentityCacheError
"""

from uuid import UUID

from src.core.result import Failure, Success
from src.domain.entities.user_information import UserInformation
from src.domain.protocols import CacheProtocol, IdentityCacheError, LoggerProtocol
from src.infrastructure.cache.cache_keys import CacheKeys

DEFAULT_IDENTITY_TTL = 3600


class RedisIdentityCache:
    """Redis implementation of IdentityCache protocol.

    Note: Does NOT inherit from IdentityCache protocol (uses structural typing).

    Attributes:
        _cache: CacheProtocol implementation (RedisAdapter).
        _logger: Structured logger.
        _keys: Key builder.
        _ttl_seconds: Default lifetime of a cached identity.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        logger: LoggerProtocol,
        ttl_seconds: int = DEFAULT_IDENTITY_TTL,
        keys: CacheKeys | None = None,
    ) -> None:
        self._cache = cache
        self._logger = logger
        self._ttl_seconds = ttl_seconds
        self._keys = keys or CacheKeys()

    async def get(self, user_id: UUID) -> UserInformation | None:
        """Get a cached identity.

        Returns:
            UserInformation if cached, None on miss, cache error or a
            corrupt entry.
        """
        key = self._keys.user(user_id)

        match await self._cache.get_json(key):
            case Success(value=None):
                return None
            case Success(value=data):
                try:
                    info = UserInformation.from_dict(data)
                except (KeyError, TypeError, ValueError) as e:
                    self._logger.warning(
                        "identity_cache_corrupt_entry",
                        user_id=str(user_id),
                        error_message=str(e),
                    )
                    return None
                if info.id != user_id:
                    self._logger.warning(
                        "identity_cache_key_mismatch",
                        user_id=str(user_id),
                        cached_id=str(info.id),
                    )
                    return None
                return info
            case Failure(error=error):
                self._logger.warning(
                    "identity_cache_read_failed",
                    user_id=str(user_id),
                    error_message=error.message,
                )
                return None

    async def set(
        self,
        user_id: UUID,
        info: UserInformation,
        ttl_seconds: int | None = None,
    ) -> None:
        """Store an identity. A failed write is logged and ignored."""
        result = await self._cache.set_json(
            self._keys.user(user_id),
            info.to_dict(),
            ttl=ttl_seconds or self._ttl_seconds,
        )
        if isinstance(result, Failure):
            self._logger.warning(
                "identity_cache_write_failed",
                user_id=str(user_id),
                error_message=result.error.message,
            )

    async def invalidate(self, user_id: UUID) -> None:
        """Drop one user's cached identity.

        Raises:
            IdentityCacheError: If Redis rejected the delete.
        """
        result = await self._cache.delete(self._keys.user(user_id))
        if isinstance(result, Failure):
            self._logger.error(
                "identity_cache_invalidation_failed",
                user_id=str(user_id),
                error_message=result.error.message,
            )
            raise IdentityCacheError(
                f"Could not invalidate cached identity for user {user_id}"
            )
        self._logger.debug("identity_cache_invalidated", user_id=str(user_id))

    async def invalidate_many(self, user_ids: list[UUID]) -> None:
        """Drop several cached identities in one round trip.

        Raises:
            IdentityCacheError: If Redis rejected the delete.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return

        result = await self._cache.delete_many(
            [self._keys.user(user_id) for user_id in unique_ids]
        )
        if isinstance(result, Failure):
            self._logger.error(
                "identity_cache_invalidation_failed",
                user_count=len(unique_ids),
                error_message=result.error.message,
            )
            raise IdentityCacheError(
                f"Could not invalidate cached identities for {len(unique_ids)} users"
            )
        self._logger.debug("identity_cache_invalidated", user_count=len(unique_ids))
