"""
Document store implementations for Files Manager.

Available backends:
- SQLiteDocumentStore: Local file-backed store for users and entries
"""

from files_manager.core.document_store.base import DocumentStore
from files_manager.core.document_store.sqlite_store import SQLiteDocumentStore

__all__ = [
    "DocumentStore",
    "SQLiteDocumentStore",
]
