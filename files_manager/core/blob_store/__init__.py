"""
Blob persistence for file and image payloads.

Available backends:
- LocalBlobStore: One file per blob under a configurable root directory
"""

from files_manager.core.blob_store.base import BlobStore
from files_manager.core.blob_store.local_store import LocalBlobStore

__all__ = [
    "BlobStore",
    "LocalBlobStore",
]
