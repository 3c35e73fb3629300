"""
Credential helpers.

Parses the Basic authorization header used to issue tokens and hashes
passwords the way stored user records expect.
"""

import base64
import binascii
import hashlib

from files_manager.utils.exceptions import InvalidCredentialsFormatError, UnauthorizedError

BASIC_SCHEME = "Basic "


def parse_basic_credentials(header: str | None) -> tuple[str, str]:
    """
    Decode an ``Authorization: Basic`` header into ``(email, password)``.

    Args:
        header: Raw header value

    Returns:
        Tuple of email and password

    Raises:
        UnauthorizedError: If the header is missing or uses another scheme
        InvalidCredentialsFormatError: If the payload is not base64 of ``email:password``
    """
    if not header or not header.startswith(BASIC_SCHEME):
        raise UnauthorizedError()

    encoded = header[len(BASIC_SCHEME) :].strip()
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidCredentialsFormatError(context={"reason": str(e)}) from e

    email, separator, password = decoded.partition(":")
    if not separator:
        raise InvalidCredentialsFormatError(context={"reason": "missing ':' separator"})

    return email, password


def hash_password(password: str) -> str:
    """SHA-1 hex digest of a password, matching existing user records."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest()
