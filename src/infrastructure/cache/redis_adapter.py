"""Redis adapter implementing CacheProtocol.

Wraps the async Redis client and maps Redis exceptions to CacheError.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Returns Result types for all operations; never raises RedisError
- Callers choose the failure policy (the identity cache treats read
  failures as misses but never ignores a failed delete)
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


def _cache_failure(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    error: Exception,
    **details: Any,
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=message,
            details={
                **{k: str(v) for k, v in details.items()},
                "error": str(error),
                "type": type(error).__name__,
            },
        )
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                e,
                key=key,
            )
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        """Get JSON object from Redis.

        Returns:
            Result with parsed dict, None if not found, or CacheError (also
            when the stored value is not a JSON object).
        """
        match await self.get(key):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    return _cache_failure(
                        InfrastructureErrorCode.CACHE_GET_ERROR,
                        f"Failed to parse JSON for key '{key}'",
                        e,
                        key=key,
                    )
                if not isinstance(parsed, dict):
                    return Failure(
                        error=CacheError(
                            code=ErrorCode.CACHE_UNAVAILABLE,
                            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                            message=f"Cached value for key '{key}' is not an object",
                            details={"key": key},
                        )
                    )
                return Success(value=parsed)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                e,
                key=key,
                ttl=ttl,
            )
        return Success(value=None)

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Serialize ``value`` as JSON and store it."""
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to serialize value for key '{key}'",
                e,
                key=key,
            )
        return await self.set(key, serialized, ttl)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                e,
                key=key,
            )
        return Success(value=deleted_count > 0)

    async def delete_many(self, keys: list[str]) -> Result[int, CacheError]:
        """Delete several keys in one round trip.

        Returns:
            Result with number of keys removed, or CacheError.
        """
        if not keys:
            return Success(value=0)
        try:
            deleted_count = await self._redis.delete(*keys)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete {len(keys)} keys from cache",
                e,
            )
        return Success(value=int(deleted_count))

    async def exists(self, key: str) -> Result[bool, CacheError]:
        """Check if key exists in Redis."""
        try:
            exists_count = await self._redis.exists(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to check existence of key '{key}'",
                e,
                key=key,
            )
        return Success(value=exists_count > 0)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        """Get time to live for key in Redis.

        Returns:
            Result with seconds until expiration, None if no TTL or key
            doesn't exist, or CacheError.
        """
        try:
            ttl_value = await self._redis.ttl(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get TTL for key '{key}'",
                e,
                key=key,
            )
        # Redis returns -2 if key doesn't exist, -1 if no expiration
        if ttl_value in (-2, -1):
            return Success(value=None)
        return Success(value=ttl_value)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                e,
            )
        return Success(value=True)
