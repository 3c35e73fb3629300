"""
Base interface for key-value storage with expiry.

Expiry is a store capability: ``get`` returns None once a key's TTL has
elapsed. Callers never sweep or poll for expired keys.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for TTL key-value stores."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int) -> None:
        """
        Store a value that disappears after ``ttl`` seconds.

        Args:
            key: Key to write
            value: String value
            ttl: Lifetime in seconds, must be positive
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        Read a value.

        Args:
            key: Key to read

        Returns:
            The stored value, or None if absent or expired
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Delete a key.

        Args:
            key: Key to delete

        Returns:
            True if a live key was removed, False if it was already absent
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the store is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
        pass
