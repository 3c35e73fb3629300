"""
Custom exception hierarchy for Files Manager.

Provides structured error types that the HTTP layer maps to status codes.
All exceptions inherit from FilesManagerError for easy catching.
"""


class FilesManagerError(Exception):
    """
    Base exception for all Files Manager errors.
    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize Files Manager error.
        Args:
            message: Error message returned to the caller
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UnauthorizedError(FilesManagerError):
    """
    Authentication errors.
    Raised for missing, invalid, expired or revoked tokens and bad credentials.
    The cases are never distinguished to the caller.
    """

    status_code = 401

    def __init__(self, message: str = "Unauthorized", context: dict | None = None):
        super().__init__(message, context)


class InvalidCredentialsFormatError(UnauthorizedError):
    """
    Malformed Basic credential encoding.
    Surfaces to the caller exactly like bad credentials.
    """

    pass


class BadRequestError(FilesManagerError):
    """
    Validation errors.
    Raised when a request field is missing or invalid.
    """

    status_code = 400


class MissingEmailError(BadRequestError):
    def __init__(self, message: str = "Missing email", context: dict | None = None):
        super().__init__(message, context)


class MissingPasswordError(BadRequestError):
    def __init__(self, message: str = "Missing password", context: dict | None = None):
        super().__init__(message, context)


class MissingNameError(BadRequestError):
    def __init__(self, message: str = "Missing name", context: dict | None = None):
        super().__init__(message, context)


class MissingTypeError(BadRequestError):
    def __init__(self, message: str = "Missing type", context: dict | None = None):
        super().__init__(message, context)


class MissingDataError(BadRequestError):
    def __init__(self, message: str = "Missing data", context: dict | None = None):
        super().__init__(message, context)


class InvalidParentError(BadRequestError):
    def __init__(self, message: str = "Parent not found", context: dict | None = None):
        super().__init__(message, context)


class ParentNotFolderError(BadRequestError):
    def __init__(self, message: str = "Parent is not a folder", context: dict | None = None):
        super().__init__(message, context)


class ConflictError(BadRequestError):
    """
    Duplicate resource errors.
    Reported with status 400 to stay compatible with existing clients.
    """

    pass


class AlreadyExistsError(ConflictError):
    def __init__(self, message: str = "Already exists", context: dict | None = None):
        super().__init__(message, context)


class NotFoundError(FilesManagerError):
    """
    Resource not found errors.
    Raised when an entry does not exist or is not visible to the caller.
    """

    status_code = 404

    def __init__(self, message: str = "Not found", context: dict | None = None):
        super().__init__(message, context)


class StoreError(FilesManagerError):
    """
    Base exception for store operations.
    Used for errors related to data storage operations.
    """

    status_code = 500


class StorageUnavailableError(StoreError):
    """
    Blob storage errors.
    Raised when a payload cannot be written to durable storage.
    """

    pass


class DocumentStoreError(StoreError):
    """
    Document store operation errors.
    Raised when user or entry records cannot be read or written.
    """

    pass


class KeyValueStoreError(StoreError):
    """
    Key-value store operation errors.
    Raised when the token cache cannot be reached.
    """

    pass


class ConfigurationError(FilesManagerError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class ServiceUnavailableError(FilesManagerError):
    """
    Service not ready.
    Raised while the engine is not initialized.
    """

    status_code = 503

    def __init__(self, message: str = "Service unavailable", context: dict | None = None):
        super().__init__(message, context)
