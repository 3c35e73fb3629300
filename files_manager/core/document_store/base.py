"""
Base interface for document storage of users and entries.
"""

from abc import ABC, abstractmethod

from files_manager.models.entry import Entry
from files_manager.models.user import User


class DocumentStore(ABC):
    """Abstract base class for document store implementations."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the store (create tables/collections)."""
        pass

    # ═══════════════════════════════════════════════════════════
    # USER OPERATIONS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def insert_user(self, user: User) -> User:
        """
        Insert a user record.

        Args:
            user: User to store

        Returns:
            The stored user

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None:
        """
        Retrieve a user by ID.

        Args:
            user_id: User identifier

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    async def find_user_by_email(self, email: str) -> User | None:
        """
        Retrieve a user by email.

        Args:
            email: Login email

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    async def count_users(self) -> int:
        """Number of registered users."""
        pass

    # ═══════════════════════════════════════════════════════════
    # ENTRY OPERATIONS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def insert_entry(self, entry: Entry) -> Entry:
        """
        Insert an entry record.

        Args:
            entry: Entry to store

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def get_entry(self, entry_id: str) -> Entry | None:
        """
        Retrieve an entry by ID, regardless of owner.

        Args:
            entry_id: Entry identifier

        Returns:
            Entry or None if not found
        """
        pass

    @abstractmethod
    async def list_entries(
        self,
        owner_id: str,
        parent_id: str | int,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Entry]:
        """
        List an owner's entries under a parent in insertion order.

        Args:
            owner_id: Owner to filter on
            parent_id: Parent folder ID or 0 for root
            skip: Number of entries to skip
            limit: Maximum results

        Returns:
            List of matching entries
        """
        pass

    @abstractmethod
    async def count_entries(self) -> int:
        """Number of stored entries of all kinds."""
        pass

    # ═══════════════════════════════════════════════════════════
    # UTILITY
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the store is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections."""
        pass
