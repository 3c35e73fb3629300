"""
Tests for the Redis key-value store.

The Redis client is replaced by an AsyncMock, so no server is required.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from files_manager.core.kv_store.redis_store import RedisKeyValueStore
from files_manager.utils.exceptions import KeyValueStoreError


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.fixture
def redis_store(redis_client):
    return RedisKeyValueStore(client=redis_client)


@pytest.mark.unit
@pytest.mark.asyncio
class TestRedisKeyValueStore:
    """Command mapping and error translation."""

    async def test_set_uses_expiry(self, redis_store, redis_client):
        await redis_store.set("auth_abc", "user-1", 86400)

        redis_client.set.assert_awaited_once_with("auth_abc", "user-1", ex=86400)

    async def test_set_rejects_non_positive_ttl(self, redis_store, redis_client):
        with pytest.raises(ValueError):
            await redis_store.set("k", "v", 0)

        redis_client.set.assert_not_awaited()

    async def test_get_returns_value(self, redis_store, redis_client):
        redis_client.get.return_value = "user-1"

        assert await redis_store.get("auth_abc") == "user-1"

    async def test_get_decodes_bytes(self, redis_store, redis_client):
        redis_client.get.return_value = b"user-1"

        assert await redis_store.get("auth_abc") == "user-1"

    async def test_get_missing(self, redis_store, redis_client):
        redis_client.get.return_value = None

        assert await redis_store.get("auth_abc") is None

    @pytest.mark.parametrize(("removed", "expected"), [(1, True), (0, False)])
    async def test_delete(self, redis_store, redis_client, removed, expected):
        redis_client.delete.return_value = removed

        assert await redis_store.delete("auth_abc") is expected

    async def test_errors_become_store_errors(self, redis_store, redis_client):
        redis_client.get.side_effect = RedisConnectionError("connection refused")

        with pytest.raises(KeyValueStoreError):
            await redis_store.get("auth_abc")

    async def test_ping(self, redis_store, redis_client):
        redis_client.ping.return_value = True
        assert await redis_store.ping() is True

        redis_client.ping.side_effect = RedisConnectionError("down")
        assert await redis_store.ping() is False

    async def test_close(self, redis_store, redis_client):
        await redis_store.close()

        redis_client.aclose.assert_awaited_once()
        assert redis_store.client is None

    async def test_initialize_builds_client_from_url(self):
        store = RedisKeyValueStore(url="redis://localhost:6379/3")

        await store.initialize()

        assert store.client is not None
        await store.close()
