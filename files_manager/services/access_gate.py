"""
Access Control Gate.

Single choke point in front of the metadata graph and blob storage. The
authorization predicates are pure functions of their arguments.
"""

from files_manager.models.entry import Entry
from files_manager.services.token_manager import SessionTokenManager


def authorize_read(owner_id: str, entry: Entry) -> bool:
    """Owners read their entries; anyone reads public ones."""
    return entry.owner_id == owner_id or entry.is_public


def authorize_write(owner_id: str, entry: Entry) -> bool:
    """Only the owner may write. Public visibility never grants write."""
    return entry.owner_id == owner_id


class AccessControlGate:
    """Resolves bearer tokens and applies ownership/visibility rules."""

    def __init__(self, token_manager: SessionTokenManager):
        self.token_manager = token_manager

    async def authenticate(self, token: str | None) -> str:
        """
        Resolve the request's bearer token to an owner ID.

        Raises:
            UnauthorizedError: If the token is missing or does not resolve
        """
        return await self.token_manager.resolve(token)

    @staticmethod
    def authorize_read(owner_id: str, entry: Entry) -> bool:
        return authorize_read(owner_id, entry)

    @staticmethod
    def authorize_write(owner_id: str, entry: Entry) -> bool:
        return authorize_write(owner_id, entry)
