"""
Redis key-value store.

Relies on Redis ``SET ... EX`` for expiry and on the atomicity of single
SET/DEL commands for concurrent issue/revoke.
"""

import redis.asyncio as redis
from redis.exceptions import RedisError

from files_manager.core.kv_store.base import KeyValueStore
from files_manager.utils.exceptions import KeyValueStoreError
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """Redis-backed TTL store using ``redis.asyncio``."""

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        socket_timeout: float = 5.0,
        client: redis.Redis | None = None,
    ):
        """
        Initialize Redis store.

        Args:
            url: Redis connection URL
            socket_timeout: Socket timeout in seconds
            client: Pre-built client (takes precedence over ``url``)
        """
        self.url = url
        self.socket_timeout = socket_timeout
        self.client: redis.Redis | None = client

    async def initialize(self) -> None:
        """Create the client lazily; connections are opened on first command."""
        if self.client is None:
            self.client = redis.from_url(
                self.url,
                socket_timeout=self.socket_timeout,
                decode_responses=True,
            )
            logger.info(f"Redis client created for {self.url}")

    async def _client(self) -> redis.Redis:
        if self.client is None:
            await self.initialize()
        return self.client

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            raise ValueError("TTL must be positive")
        client = await self._client()
        try:
            await client.set(key, value, ex=ttl)
        except RedisError as e:
            logger.error(f"Redis SET failed: {e}")
            raise KeyValueStoreError("Failed to write key", context={"error": str(e)}) from e

    async def get(self, key: str) -> str | None:
        client = await self._client()
        try:
            value = await client.get(key)
        except RedisError as e:
            logger.error(f"Redis GET failed: {e}")
            raise KeyValueStoreError("Failed to read key", context={"error": str(e)}) from e

        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def delete(self, key: str) -> bool:
        client = await self._client()
        try:
            removed = await client.delete(key)
        except RedisError as e:
            logger.error(f"Redis DEL failed: {e}")
            raise KeyValueStoreError("Failed to delete key", context={"error": str(e)}) from e
        return removed > 0

    async def ping(self) -> bool:
        client = await self._client()
        try:
            return bool(await client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None
