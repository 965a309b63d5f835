"""Unit tests for RedisIdentityCache over an in-memory CacheProtocol.

Tests cover:
- Key format ``user:<id>`` and TTL
- Miss, hit and corrupt entries
- Read failures degrade to a miss
- Invalidation failures raise IdentityCacheError
"""

import json

import pytest
from uuid_extensions import uuid7

from src.domain.protocols import IdentityCacheError
from src.infrastructure.cache import CacheKeys, RedisIdentityCache
from tests.conftest import InMemoryCache, RecordingLogger, make_identity


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def identity_cache(cache, logger) -> RedisIdentityCache:
    return RedisIdentityCache(cache=cache, logger=logger, ttl_seconds=120)


@pytest.mark.unit
class TestCacheKeys:
    def test_user_key(self):
        user_id = uuid7()

        assert CacheKeys().user(user_id) == f"user:{user_id}"

    def test_prefixed_key(self):
        user_id = uuid7()

        assert CacheKeys(prefix="authz").user(user_id) == f"authz:user:{user_id}"


@pytest.mark.unit
class TestIdentityCacheReadWrite:
    async def test_miss_returns_none(self, identity_cache):
        assert await identity_cache.get(uuid7()) is None

    async def test_set_then_get(self, identity_cache, cache: InMemoryCache):
        identity = make_identity(roles=["admin"], permissions=["user list"])

        await identity_cache.set(identity.id, identity)

        assert await identity_cache.get(identity.id) == identity
        key = f"user:{identity.id}"
        assert cache.ttls[key] == 120
        assert json.loads(cache.store[key])["permissions"] == ["user list"]

    async def test_explicit_ttl_overrides_default(self, identity_cache, cache):
        identity = make_identity()

        await identity_cache.set(identity.id, identity, ttl_seconds=5)

        assert cache.ttls[f"user:{identity.id}"] == 5

    async def test_corrupt_entry_is_a_miss(self, identity_cache, cache, logger):
        user_id = uuid7()
        cache.store[f"user:{user_id}"] = json.dumps({"id": str(user_id)})

        assert await identity_cache.get(user_id) is None
        assert "identity_cache_corrupt_entry" in logger.events("warning")

    async def test_entry_for_other_user_is_a_miss(self, identity_cache, cache):
        user_id = uuid7()
        other = make_identity()
        cache.store[f"user:{user_id}"] = json.dumps(other.to_dict())

        assert await identity_cache.get(user_id) is None

    async def test_read_failure_is_a_miss(self, identity_cache, cache, logger):
        identity = make_identity()
        await identity_cache.set(identity.id, identity)
        cache.fail_reads = True

        assert await identity_cache.get(identity.id) is None
        assert "identity_cache_read_failed" in logger.events("warning")

    async def test_write_failure_is_logged_not_raised(
        self, identity_cache, cache, logger
    ):
        cache.fail_writes = True
        identity = make_identity()

        await identity_cache.set(identity.id, identity)

        assert "identity_cache_write_failed" in logger.events("warning")


@pytest.mark.unit
class TestIdentityCacheInvalidation:
    async def test_invalidate_removes_entry(self, identity_cache):
        identity = make_identity()
        await identity_cache.set(identity.id, identity)

        await identity_cache.invalidate(identity.id)

        assert await identity_cache.get(identity.id) is None

    async def test_invalidate_missing_entry_is_fine(self, identity_cache):
        await identity_cache.invalidate(uuid7())

    async def test_invalidate_many(self, identity_cache):
        first, second, untouched = make_identity(), make_identity(), make_identity()
        for identity in (first, second, untouched):
            await identity_cache.set(identity.id, identity)

        await identity_cache.invalidate_many([first.id, second.id, first.id])

        assert await identity_cache.get(first.id) is None
        assert await identity_cache.get(second.id) is None
        assert await identity_cache.get(untouched.id) == untouched

    async def test_invalidate_many_empty_is_noop(self, identity_cache, cache):
        cache.fail_writes = True

        await identity_cache.invalidate_many([])

    async def test_invalidate_failure_raises(self, identity_cache, cache, logger):
        cache.fail_writes = True

        with pytest.raises(IdentityCacheError):
            await identity_cache.invalidate(uuid7())
        assert "identity_cache_invalidation_failed" in logger.events("error")

    async def test_invalidate_many_failure_raises(self, identity_cache, cache):
        cache.fail_writes = True

        with pytest.raises(IdentityCacheError):
            await identity_cache.invalidate_many([uuid7()])
