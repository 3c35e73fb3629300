"""
Services for Files Manager.

Core services:
- SessionTokenManager: issue/resolve/revoke bearer tokens
- AccessControlGate: authentication and read/write predicates
- CredentialStore: registration and credential checks
- MetadataGraph: folder hierarchy and listings
- AuthService, FileService: operations used by the HTTP layer
- FilesManagerEngine: composition root
"""

from files_manager.services.access_gate import (
    AccessControlGate,
    authorize_read,
    authorize_write,
)
from files_manager.services.auth_service import AuthService
from files_manager.services.credential_store import CredentialStore
from files_manager.services.file_service import FileService
from files_manager.services.files_engine import FilesManagerEngine
from files_manager.services.metadata_graph import MetadataGraph
from files_manager.services.token_manager import SessionTokenManager

__all__ = [
    "SessionTokenManager",
    "AccessControlGate",
    "authorize_read",
    "authorize_write",
    "CredentialStore",
    "MetadataGraph",
    "AuthService",
    "FileService",
    "FilesManagerEngine",
]
