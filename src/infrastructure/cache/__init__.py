"""Cache infrastructure package.

All cache dependencies are managed through src.core.container.

Architecture:
- RedisAdapter: Concrete Redis implementation of CacheProtocol
- RedisIdentityCache: Resolved-identity cache (user:{id} keys)
- CacheKeys: Key construction
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.identity_cache import RedisIdentityCache
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "RedisAdapter",
    "RedisIdentityCache",
]
