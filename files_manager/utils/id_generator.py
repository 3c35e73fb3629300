"""
ID generation utilities for Files Manager.

Every identifier is random so concurrent requests never need a shared counter:
- Users: 32 hex characters
- Entries: 32 hex characters
- Session tokens: canonical UUID4 string (36 characters)
- Blob names: canonical UUID4 string
"""

from uuid import uuid4


def generate_user_id() -> str:
    """
    Generate unique User ID.

    Returns:
        32 lowercase hex characters
    """
    return uuid4().hex


def generate_entry_id() -> str:
    """
    Generate unique Entry ID.

    Returns:
        32 lowercase hex characters
    """
    return uuid4().hex


def generate_token() -> str:
    """
    Generate an opaque session token.

    Returns:
        UUID4 string in its 36 character hyphenated form
    """
    return str(uuid4())


def generate_blob_name() -> str:
    """Generate a fresh file name for a blob."""
    return str(uuid4())
