"""
In-process key-value store with real TTL semantics.

Used for tests and single-process deployments. Expiry is evaluated lazily on
access against an injectable clock, so there is no background sweeper.
"""

import time
from collections.abc import Callable

from files_manager.core.kv_store.base import KeyValueStore
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class MemoryKeyValueStore(KeyValueStore):
    """
    Dictionary-backed TTL store.

    Features:
    - Per-key expiry deadline
    - Expired keys behave exactly like absent keys
    - Clock injection for deterministic tests
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize memory store.

        Args:
            clock: Function returning the current time in seconds
        """
        self._clock = clock
        self._data: dict[str, tuple[str, float]] = {}

    async def initialize(self) -> None:
        logger.debug("Memory key-value store ready")

    def _live_value(self, key: str) -> str | None:
        item = self._data.get(key)
        if item is None:
            return None

        value, expires_at = item
        if self._clock() >= expires_at:
            del self._data[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            raise ValueError("TTL must be positive")
        self._data[key] = (value, self._clock() + ttl)

    async def get(self, key: str) -> str | None:
        return self._live_value(key)

    async def delete(self, key: str) -> bool:
        if self._live_value(key) is None:
            return False
        del self._data[key]
        return True

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        """Number of keys that have not expired yet."""
        return sum(1 for key in list(self._data) if self._live_value(key) is not None)
