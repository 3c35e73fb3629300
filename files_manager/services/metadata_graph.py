"""
Metadata Graph - folders, files and images with parent/child validation.

Brings together:
- Parent validation (exists and is a folder, or root)
- Folder and leaf creation with the blob-locator rule
- Visibility-filtered lookup by ID
- Owner-scoped, paginated listing by parent

The graph never self-heals: invalid parents are rejected at creation time.
"""

from typing import Any

from files_manager.core.document_store.base import DocumentStore
from files_manager.models.entry import (
    LEAF_KINDS,
    ROOT_PARENT_ID,
    Entry,
    EntryKind,
    normalize_parent_id,
)
from files_manager.services.access_gate import authorize_read
from files_manager.utils.exceptions import (
    InvalidParentError,
    MissingDataError,
    MissingNameError,
    MissingTypeError,
    NotFoundError,
    ParentNotFolderError,
)
from files_manager.utils.id_generator import generate_entry_id
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 20


class MetadataGraph:
    """
    Document model for the folder hierarchy.

    Parent lookups check existence and kind only; the parent may belong to
    another owner.
    """

    def __init__(self, document_store: DocumentStore, page_size: int = DEFAULT_PAGE_SIZE):
        """
        Initialize Metadata Graph.

        Args:
            document_store: Store holding entry records
            page_size: Number of entries per listing page
        """
        self.document_store = document_store
        self.page_size = page_size

    async def validate_parent(self, parent_id: Any) -> str | int:
        """
        Check that ``parent_id`` is root or an existing folder.

        Args:
            parent_id: Raw parent reference

        Returns:
            The normalized parent ID

        Raises:
            InvalidParentError: If the parent does not exist
            ParentNotFolderError: If the parent is a file or image
        """
        parent_id = normalize_parent_id(parent_id)
        if parent_id == ROOT_PARENT_ID:
            return parent_id

        parent = await self.document_store.get_entry(parent_id)
        if parent is None:
            raise InvalidParentError(context={"parent_id": parent_id})
        if not parent.is_folder:
            raise ParentNotFolderError(context={"parent_id": parent_id})
        return parent_id

    async def create_folder(
        self,
        owner_id: str,
        name: str | None,
        parent_id: Any = ROOT_PARENT_ID,
        is_public: bool = False,
    ) -> Entry:
        """
        Create a folder.

        Args:
            owner_id: Owner user ID
            name: Folder name, must be non-empty
            parent_id: Parent folder ID or 0 for root
            is_public: Visibility flag

        Returns:
            The stored folder entry
        """
        if not name:
            raise MissingNameError()

        parent_id = await self.validate_parent(parent_id)

        entry = Entry(
            id=generate_entry_id(),
            owner_id=owner_id,
            name=name,
            kind=EntryKind.FOLDER,
            parent_id=parent_id,
            is_public=is_public,
        )
        await self.document_store.insert_entry(entry)

        logger.info(f"Created folder {entry.id} under {parent_id} for user {owner_id}")
        return entry

    async def create_leaf(
        self,
        owner_id: str,
        name: str | None,
        kind: EntryKind | str,
        parent_id: Any,
        blob_locator: str | None,
        is_public: bool = False,
    ) -> Entry:
        """
        Create a file or image entry referencing an already persisted blob.

        Args:
            owner_id: Owner user ID
            name: Entry name, must be non-empty
            kind: ``file`` or ``image``
            parent_id: Parent folder ID or 0 for root
            blob_locator: Locator returned by the blob store
            is_public: Visibility flag

        Returns:
            The stored entry

        Raises:
            MissingNameError: If name is empty
            MissingTypeError: If kind is not a leaf kind
            MissingDataError: If no blob locator is supplied
        """
        if not name:
            raise MissingNameError()

        try:
            kind = EntryKind(kind)
        except ValueError as e:
            raise MissingTypeError() from e
        if kind not in LEAF_KINDS:
            raise MissingTypeError()

        if not blob_locator:
            raise MissingDataError()

        parent_id = await self.validate_parent(parent_id)

        entry = Entry(
            id=generate_entry_id(),
            owner_id=owner_id,
            name=name,
            kind=kind,
            parent_id=parent_id,
            is_public=is_public,
            blob_locator=blob_locator,
        )
        await self.document_store.insert_entry(entry)

        logger.info(f"Created {kind.value} {entry.id} under {parent_id} for user {owner_id}")
        return entry

    async def get_by_id(self, owner_id: str, entry_id: str) -> Entry:
        """
        Fetch an entry visible to ``owner_id``.

        Raises:
            NotFoundError: If the entry is absent or not readable by the caller;
                the two cases are indistinguishable
        """
        entry = await self.document_store.get_entry(entry_id)
        if entry is None or not authorize_read(owner_id, entry):
            raise NotFoundError()
        return entry

    async def list_by_parent(
        self, owner_id: str, parent_id: Any = ROOT_PARENT_ID, page: int = 0
    ) -> list[Entry]:
        """
        List the caller's own entries under a parent.

        Args:
            owner_id: Requesting user; other owners' entries are never listed
            parent_id: Parent folder ID or 0 for root
            page: Zero-based page number

        Returns:
            Up to ``page_size`` entries in insertion order, empty when out of range
        """
        if page < 0:
            return []

        return await self.document_store.list_entries(
            owner_id=owner_id,
            parent_id=normalize_parent_id(parent_id),
            skip=page * self.page_size,
            limit=self.page_size,
        )
