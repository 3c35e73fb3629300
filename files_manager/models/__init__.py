"""
Data models for Files Manager.

Core models:
- User: registered account owned by the credential store
- SessionToken: issued bearer token
- Entry, EntryKind: folder/file/image metadata as one tagged record
- BlobWritten, EntryCreated: the two phases of an upload
"""

from files_manager.models.entry import (
    LEAF_KINDS,
    ROOT_PARENT_ID,
    BlobWritten,
    Entry,
    EntryCreated,
    EntryKind,
    normalize_parent_id,
)
from files_manager.models.session import (
    DEFAULT_TOKEN_TTL_SECONDS,
    TOKEN_KEY_PREFIX,
    SessionToken,
    token_key,
)
from files_manager.models.user import User

__all__ = [
    # Users
    "User",
    # Sessions
    "SessionToken",
    "TOKEN_KEY_PREFIX",
    "DEFAULT_TOKEN_TTL_SECONDS",
    "token_key",
    # Entries
    "Entry",
    "EntryKind",
    "LEAF_KINDS",
    "ROOT_PARENT_ID",
    "normalize_parent_id",
    "BlobWritten",
    "EntryCreated",
]
