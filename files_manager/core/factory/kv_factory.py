"""
Factory for creating key-value store backends.
"""

from files_manager.config import Config
from files_manager.core.kv_store.base import KeyValueStore
from files_manager.core.kv_store.memory_store import MemoryKeyValueStore
from files_manager.core.kv_store.redis_store import RedisKeyValueStore
from files_manager.utils.exceptions import ConfigurationError


class KeyValueStoreFactory:
    """Factory for creating token store backends from configuration."""

    @staticmethod
    def create(config: Config) -> KeyValueStore:
        """
        Create key-value store from configuration.

        Args:
            config: Main configuration object

        Returns:
            Key-value store instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.kv_backend == "redis":
            return RedisKeyValueStore(
                url=config.redis.url,
                socket_timeout=config.redis.socket_timeout,
            )
        elif config.kv_backend == "memory":
            return MemoryKeyValueStore()
        else:
            raise ConfigurationError(f"Unsupported key-value backend: {config.kv_backend}")
