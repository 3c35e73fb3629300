"""
Factory for creating document store backends.
"""

from files_manager.config import Config
from files_manager.core.document_store.base import DocumentStore
from files_manager.core.document_store.sqlite_store import SQLiteDocumentStore
from files_manager.utils.exceptions import ConfigurationError


class DocumentStoreFactory:
    """Factory for creating document store backends from configuration."""

    @staticmethod
    def create(config: Config) -> DocumentStore:
        """
        Create document store from configuration.

        Args:
            config: Main configuration object

        Returns:
            Document store instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.document_backend == "sqlite":
            return SQLiteDocumentStore(db_path=config.database.path)
        else:
            raise ConfigurationError(
                f"Unsupported document backend: {config.document_backend}"
            )
