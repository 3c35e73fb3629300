"""
Files Manager Engine - wires stores and services together.

Brings together:
- Key-value store (session tokens)
- Document store (users and entries)
- Blob store (file and image payloads)
- Token manager, access gate, credential store, metadata graph
- Auth and file services used by the HTTP layer
"""

import asyncio
from typing import Any

from files_manager.config import Config
from files_manager.core.blob_store.base import BlobStore
from files_manager.core.document_store.base import DocumentStore
from files_manager.core.kv_store.base import KeyValueStore
from files_manager.services.access_gate import AccessControlGate
from files_manager.services.auth_service import AuthService
from files_manager.services.credential_store import CredentialStore
from files_manager.services.file_service import FileService
from files_manager.services.metadata_graph import MetadataGraph
from files_manager.services.token_manager import SessionTokenManager
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class FilesManagerEngine:
    """
    Composition root for the file store.

    Every store is injected; nothing is held in module-level globals.
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        document_store: DocumentStore,
        blob_store: BlobStore,
        config: Config,
    ):
        """
        Initialize Files Manager Engine.

        Args:
            kv_store: TTL store for session tokens
            document_store: Store for users and entries
            blob_store: Storage for file and image payloads
            config: Configuration object
        """
        self.kv_store = kv_store
        self.document_store = document_store
        self.blob_store = blob_store
        self.config = config

        self.token_manager = SessionTokenManager(kv_store, ttl_seconds=config.auth.token_ttl_seconds)
        self.gate = AccessControlGate(self.token_manager)
        self.credentials = CredentialStore(document_store)
        self.graph = MetadataGraph(document_store, page_size=config.auth.page_size)

        self.auth = AuthService(self.credentials, self.token_manager, self.gate)
        self.files = FileService(self.gate, self.graph, blob_store)

    async def initialize(self) -> None:
        """Initialize all stores."""
        await self.kv_store.initialize()
        await self.document_store.initialize()
        logger.info("Files Manager engine initialized")

    async def close(self) -> None:
        """Close all store connections."""
        await self.kv_store.close()
        await self.document_store.close()
        logger.info("Files Manager engine closed")

    async def get_status(self) -> dict[str, bool]:
        """Liveness of the token cache, document store and blob storage."""
        redis_alive, db_alive, storage_alive = await asyncio.gather(
            self.kv_store.ping(), self.document_store.ping(), self.blob_store.ping()
        )
        return {"redis": redis_alive, "db": db_alive, "storage": storage_alive}

    async def get_statistics(self) -> dict[str, Any]:
        """Number of users and entries."""
        users, files = await asyncio.gather(
            self.document_store.count_users(), self.document_store.count_entries()
        )
        return {"users": users, "files": files}
