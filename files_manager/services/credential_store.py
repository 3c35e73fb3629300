"""
Credential Store adapter.

Registration and credential verification over the document store's user
records (identifier, email, password hash).
"""

from files_manager.core.document_store.base import DocumentStore
from files_manager.models.user import User
from files_manager.utils.credentials import hash_password
from files_manager.utils.exceptions import (
    AlreadyExistsError,
    MissingEmailError,
    MissingPasswordError,
    UnauthorizedError,
)
from files_manager.utils.id_generator import generate_user_id
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class CredentialStore:
    """Lookup and insert operations over user records."""

    def __init__(self, document_store: DocumentStore):
        self.document_store = document_store

    async def register(self, email: str | None, password: str | None) -> User:
        """
        Register a new user.

        Args:
            email: Login email
            password: Plain-text password, hashed before storage

        Returns:
            The created user

        Raises:
            MissingEmailError: If email is empty
            MissingPasswordError: If password is empty
            AlreadyExistsError: If the email is already registered
        """
        if not email:
            raise MissingEmailError()
        if not password:
            raise MissingPasswordError()

        if await self.document_store.find_user_by_email(email):
            raise AlreadyExistsError(context={"email": email})

        # The unique index still catches a concurrent registration of the same email
        user = User(id=generate_user_id(), email=email, password_hash=hash_password(password))
        await self.document_store.insert_user(user)

        logger.info(f"Registered user {user.id}")
        return user

    async def verify(self, email: str, password: str) -> User:
        """
        Check an email/password pair.

        Raises:
            UnauthorizedError: If the user is unknown or the password is wrong
        """
        user = await self.document_store.find_user_by_email(email)
        if user is None or user.password_hash != hash_password(password):
            raise UnauthorizedError()
        return user

    async def get(self, user_id: str) -> User | None:
        return await self.document_store.get_user(user_id)
