"""
Factory for creating blob store backends.
"""

from files_manager.config import StorageConfig
from files_manager.core.blob_store.base import BlobStore
from files_manager.core.blob_store.local_store import LocalBlobStore


class BlobStoreFactory:
    """Factory for creating blob stores from configuration."""

    @staticmethod
    def create(config: StorageConfig) -> BlobStore:
        """
        Create blob store from configuration.

        Args:
            config: Storage configuration

        Returns:
            Blob store instance
        """
        return LocalBlobStore(root=config.folder_path)
