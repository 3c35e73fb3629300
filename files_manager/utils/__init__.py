"""Utility modules for Files Manager."""

from files_manager.utils.credentials import hash_password, parse_basic_credentials
from files_manager.utils.exceptions import (
    AlreadyExistsError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DocumentStoreError,
    FilesManagerError,
    InvalidCredentialsFormatError,
    InvalidParentError,
    KeyValueStoreError,
    MissingDataError,
    MissingEmailError,
    MissingNameError,
    MissingPasswordError,
    MissingTypeError,
    NotFoundError,
    ParentNotFolderError,
    ServiceUnavailableError,
    StorageUnavailableError,
    StoreError,
    UnauthorizedError,
)
from files_manager.utils.id_generator import (
    generate_blob_name,
    generate_entry_id,
    generate_token,
    generate_user_id,
)
from files_manager.utils.logger import get_logger, mask_token, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "mask_token",
    # ID Generators
    "generate_user_id",
    "generate_entry_id",
    "generate_token",
    "generate_blob_name",
    # Credentials
    "parse_basic_credentials",
    "hash_password",
    # Exceptions
    "FilesManagerError",
    "UnauthorizedError",
    "InvalidCredentialsFormatError",
    "BadRequestError",
    "MissingEmailError",
    "MissingPasswordError",
    "MissingNameError",
    "MissingTypeError",
    "MissingDataError",
    "InvalidParentError",
    "ParentNotFolderError",
    "ConflictError",
    "AlreadyExistsError",
    "NotFoundError",
    "StoreError",
    "StorageUnavailableError",
    "DocumentStoreError",
    "KeyValueStoreError",
    "ConfigurationError",
    "ServiceUnavailableError",
]
