"""
Authentication service - registration, connect/disconnect and current user.
"""

from files_manager.models.session import SessionToken
from files_manager.models.user import User
from files_manager.services.access_gate import AccessControlGate
from files_manager.services.credential_store import CredentialStore
from files_manager.services.token_manager import SessionTokenManager
from files_manager.utils.credentials import parse_basic_credentials
from files_manager.utils.exceptions import UnauthorizedError


class AuthService:
    """Account and session operations exposed to the transport layer."""

    def __init__(
        self,
        credentials: CredentialStore,
        token_manager: SessionTokenManager,
        gate: AccessControlGate,
    ):
        self.credentials = credentials
        self.token_manager = token_manager
        self.gate = gate

    async def register(self, email: str | None, password: str | None) -> User:
        return await self.credentials.register(email, password)

    async def connect(self, authorization: str | None) -> SessionToken:
        """
        Issue a token from a Basic ``email:password`` header.

        Raises:
            UnauthorizedError: For malformed headers and bad credentials alike
        """
        email, password = parse_basic_credentials(authorization)
        user = await self.credentials.verify(email, password)
        return await self.token_manager.issue(user.id)

    async def disconnect(self, token: str | None) -> None:
        await self.token_manager.revoke(token)

    async def me(self, token: str | None) -> User:
        """
        Return the user owning the token.

        Raises:
            UnauthorizedError: If the token does not resolve or its user is gone
        """
        owner_id = await self.gate.authenticate(token)
        user = await self.credentials.get(owner_id)
        if user is None:
            raise UnauthorizedError()
        return user
