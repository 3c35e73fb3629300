"""
Factory modules for creating Files Manager components.

Provides modular factories for the key-value, document and blob stores.
"""

from files_manager.core.factory.blob_factory import BlobStoreFactory
from files_manager.core.factory.document_factory import DocumentStoreFactory
from files_manager.core.factory.kv_factory import KeyValueStoreFactory

__all__ = [
    "KeyValueStoreFactory",
    "DocumentStoreFactory",
    "BlobStoreFactory",
]
