"""
Key-value store implementations for session tokens.

Available backends:
- RedisKeyValueStore: Production store, TTL enforced by Redis
- MemoryKeyValueStore: In-process store with lazy TTL expiry
"""

from files_manager.core.kv_store.base import KeyValueStore
from files_manager.core.kv_store.memory_store import MemoryKeyValueStore
from files_manager.core.kv_store.redis_store import RedisKeyValueStore

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
]
