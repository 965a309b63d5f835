"""Unit tests for RedisAdapter with a mocked redis.asyncio client.

Tests cover:
- Result mapping for get/set/delete/ttl
- JSON helpers
- RedisError is converted to CacheError, never raised
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.result import Failure, Success
from src.infrastructure.cache import RedisAdapter
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def adapter(redis_client) -> RedisAdapter:
    return RedisAdapter(redis_client=redis_client)


@pytest.mark.unit
class TestRedisAdapterReads:
    async def test_get_decodes_bytes(self, adapter, redis_client):
        redis_client.get.return_value = b"value"

        result = await adapter.get("key")

        assert result == Success(value="value")

    async def test_get_missing(self, adapter, redis_client):
        redis_client.get.return_value = None

        assert await adapter.get("key") == Success(value=None)

    async def test_get_json_parses_object(self, adapter, redis_client):
        redis_client.get.return_value = b'{"id": "1"}'

        assert await adapter.get_json("key") == Success(value={"id": "1"})

    async def test_get_json_invalid_json_is_failure(self, adapter, redis_client):
        redis_client.get.return_value = b"{not json"

        result = await adapter.get_json("key")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)

    async def test_get_json_non_object_is_failure(self, adapter, redis_client):
        redis_client.get.return_value = b"[1, 2]"

        assert isinstance(await adapter.get_json("key"), Failure)

    async def test_get_connection_error(self, adapter, redis_client):
        redis_client.get.side_effect = RedisConnectionError("down")

        result = await adapter.get("key")

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR
        assert result.error.details["type"] == "ConnectionError"

    @pytest.mark.parametrize(("raw", "expected"), [(-2, None), (-1, None), (42, 42)])
    async def test_ttl(self, adapter, redis_client, raw, expected):
        redis_client.ttl.return_value = raw

        assert await adapter.ttl("key") == Success(value=expected)


@pytest.mark.unit
class TestRedisAdapterWrites:
    async def test_set_with_ttl_uses_setex(self, adapter, redis_client):
        await adapter.set("key", "value", ttl=60)

        redis_client.setex.assert_awaited_once_with("key", 60, "value")

    async def test_set_without_ttl(self, adapter, redis_client):
        await adapter.set("key", "value")

        redis_client.set.assert_awaited_once_with("key", "value")

    async def test_set_json_serializes(self, adapter, redis_client):
        result = await adapter.set_json("key", {"a": 1}, ttl=10)

        assert result == Success(value=None)
        redis_client.setex.assert_awaited_once_with("key", 10, '{"a": 1}')

    async def test_set_json_unserializable(self, adapter):
        result = await adapter.set_json("key", {"a": object()})

        assert isinstance(result, Failure)

    async def test_delete(self, adapter, redis_client):
        redis_client.delete.return_value = 1

        assert await adapter.delete("key") == Success(value=True)

    async def test_delete_many(self, adapter, redis_client):
        redis_client.delete.return_value = 2

        result = await adapter.delete_many(["a", "b", "c"])

        assert result == Success(value=2)
        redis_client.delete.assert_awaited_once_with("a", "b", "c")

    async def test_delete_many_empty_skips_redis(self, adapter, redis_client):
        assert await adapter.delete_many([]) == Success(value=0)
        redis_client.delete.assert_not_called()

    async def test_delete_error(self, adapter, redis_client):
        redis_client.delete.side_effect = RedisConnectionError("down")

        result = await adapter.delete("key")

        assert isinstance(result, Failure)
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_DELETE_ERROR
        )
