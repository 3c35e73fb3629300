"""
Entry model: folders, files and images in one tagged record.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

ROOT_PARENT_ID = 0


class EntryKind(str, Enum):
    """Discriminant for the entry variants."""

    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @property
    def is_leaf(self) -> bool:
        """Files and images carry a blob, folders never do."""
        return self is not EntryKind.FOLDER


LEAF_KINDS = frozenset({EntryKind.FILE, EntryKind.IMAGE})


def normalize_parent_id(parent_id: Any) -> str | int:
    """
    Map the various spellings of the root reference to ``0``.

    Clients send ``0``, ``"0"`` or omit the field entirely; any other value is
    treated as an entry identifier.
    """
    if parent_id is None or parent_id == ROOT_PARENT_ID or parent_id == str(ROOT_PARENT_ID):
        return ROOT_PARENT_ID
    if parent_id == "":
        return ROOT_PARENT_ID
    return str(parent_id)


class Entry(BaseModel):
    """
    Metadata record for a folder, file or image.

    The ``kind`` field is the discriminant: folders never carry a blob locator,
    files and images always do once created. Identifiers and ownership never
    change after creation.
    """

    id: str = Field(..., description="Unique entry ID")
    owner_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., min_length=1, description="Display name")
    kind: EntryKind = Field(..., description="folder, file or image")
    parent_id: str | int = Field(default=ROOT_PARENT_ID, description="0 for root or a folder ID")
    is_public: bool = Field(default=False, description="Readable by any authenticated user")
    blob_locator: str | None = Field(default=None, description="Blob path for files and images")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    def to_public_dict(self) -> dict[str, Any]:
        """
        Serialize the entry with the field names clients expect.

        Returns:
            Dictionary with ``id``, ``userId``, ``name``, ``type``, ``isPublic``,
            ``parentId`` and, for leaves, ``localPath``
        """
        data: dict[str, Any] = {
            "id": self.id,
            "userId": self.owner_id,
            "name": self.name,
            "type": self.kind.value,
            "isPublic": self.is_public,
            "parentId": self.parent_id,
        }
        if self.blob_locator is not None:
            data["localPath"] = self.blob_locator
        return data


class BlobWritten(BaseModel):
    """First phase of a leaf upload: the payload is durable."""

    locator: str
    size: int = 0


class EntryCreated(BaseModel):
    """Second phase of an upload: the metadata record exists."""

    entry: Entry
    blob: BlobWritten | None = None
