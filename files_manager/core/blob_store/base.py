"""
Base interface for blob persistence.
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Abstract base class for opaque payload storage."""

    @abstractmethod
    async def store(self, raw: bytes) -> str:
        """
        Persist a payload under a freshly generated name.

        Args:
            raw: Payload bytes

        Returns:
            Locator string identifying the stored blob

        Raises:
            StorageUnavailableError: If the payload could not be written
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the storage area is writable."""
        pass
