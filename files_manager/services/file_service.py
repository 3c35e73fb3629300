"""
File service - upload, fetch and list behind the access gate.

Upload runs in a fixed order:
1. authenticate
2. validate request shape
3. validate parent
4. for files/images, persist the blob (BlobWritten)
5. insert metadata referencing the locator (EntryCreated)

A failed blob write stops before any metadata is written. Blobs are never
rolled back, so a failed metadata insert can leave an unreferenced blob.
"""

import base64
import binascii
from typing import Any

from files_manager.core.blob_store.base import BlobStore
from files_manager.models.entry import (
    ROOT_PARENT_ID,
    BlobWritten,
    Entry,
    EntryCreated,
    EntryKind,
)
from files_manager.services.access_gate import AccessControlGate
from files_manager.services.metadata_graph import MetadataGraph
from files_manager.utils.exceptions import (
    BadRequestError,
    MissingDataError,
    MissingNameError,
    MissingTypeError,
)
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


def decode_payload(data: str) -> bytes:
    """
    Decode a base64 upload payload.

    Line breaks and other whitespace are ignored, so MIME-wrapped payloads
    decode the same as single-line ones.

    Raises:
        BadRequestError: If ``data`` is not valid base64
    """
    try:
        return base64.b64decode("".join(data.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise BadRequestError("Invalid data") from e


class FileService:
    """Entry operations; every call authenticates before touching storage."""

    def __init__(self, gate: AccessControlGate, graph: MetadataGraph, blob_store: BlobStore):
        """
        Initialize file service.

        Args:
            gate: Access control gate resolving bearer tokens
            graph: Metadata graph for entry records
            blob_store: Blob persistence for file and image payloads
        """
        self.gate = gate
        self.graph = graph
        self.blob_store = blob_store

    async def upload(
        self,
        token: str | None,
        name: str | None,
        kind: str | None,
        parent_id: Any = ROOT_PARENT_ID,
        is_public: bool = False,
        data: str | None = None,
    ) -> EntryCreated:
        """
        Create a folder, file or image.

        Args:
            token: Bearer token
            name: Entry name
            kind: ``folder``, ``file`` or ``image``
            parent_id: Parent folder ID or 0 for root
            is_public: Visibility flag
            data: Base64 payload, required for files and images

        Returns:
            EntryCreated with the stored entry and, for leaves, the written blob
        """
        owner_id = await self.gate.authenticate(token)

        if not name:
            raise MissingNameError()
        try:
            entry_kind = EntryKind(kind)
        except ValueError as e:
            raise MissingTypeError() from e
        if entry_kind.is_leaf and not data:
            raise MissingDataError()

        raw = decode_payload(data) if entry_kind.is_leaf else None
        parent_id = await self.graph.validate_parent(parent_id)

        if not entry_kind.is_leaf:
            folder = await self.graph.create_folder(owner_id, name, parent_id, is_public)
            return EntryCreated(entry=folder)

        blob = await self._write_blob(raw)
        entry = await self.graph.create_leaf(
            owner_id, name, entry_kind, parent_id, blob.locator, is_public
        )
        return EntryCreated(entry=entry, blob=blob)

    async def _write_blob(self, raw: bytes) -> BlobWritten:
        locator = await self.blob_store.store(raw)
        return BlobWritten(locator=locator, size=len(raw))

    async def fetch(self, token: str | None, entry_id: str) -> Entry:
        """
        Fetch one entry readable by the caller.

        Raises:
            UnauthorizedError: If the token does not resolve
            NotFoundError: If the entry is absent or not visible
        """
        owner_id = await self.gate.authenticate(token)
        return await self.graph.get_by_id(owner_id, entry_id)

    async def list_entries(
        self, token: str | None, parent_id: Any = ROOT_PARENT_ID, page: int = 0
    ) -> list[Entry]:
        """
        List the caller's entries under a parent, one page at a time.

        Raises:
            UnauthorizedError: If the token does not resolve
        """
        owner_id = await self.gate.authenticate(token)
        return await self.graph.list_by_parent(owner_id, parent_id, page)
