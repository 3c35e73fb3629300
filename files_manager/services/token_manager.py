"""
Session Token Manager.

Issues, resolves and revokes opaque bearer tokens. The key-value store is the
only source of truth: tokens live under ``auth_<token>`` with a fixed TTL and
disappear when the store expires them.
"""

from files_manager.core.kv_store.base import KeyValueStore
from files_manager.models.session import DEFAULT_TOKEN_TTL_SECONDS, SessionToken, token_key
from files_manager.utils.exceptions import UnauthorizedError
from files_manager.utils.id_generator import generate_token
from files_manager.utils.logger import get_logger, mask_token

logger = get_logger(__name__)


class SessionTokenManager:
    """Bearer token lifecycle backed by a TTL key-value store."""

    def __init__(self, kv_store: KeyValueStore, ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS):
        """
        Initialize token manager.

        Args:
            kv_store: Store holding ``token -> owner_id`` mappings
            ttl_seconds: Token lifetime
        """
        if ttl_seconds <= 0:
            raise ValueError("Token TTL must be positive")

        self.kv_store = kv_store
        self.ttl_seconds = ttl_seconds

    async def issue(self, owner_id: str) -> SessionToken:
        """
        Issue a new token for an owner.

        Args:
            owner_id: Authenticated user ID

        Returns:
            The issued session token
        """
        token = generate_token()
        await self.kv_store.set(token_key(token), owner_id, self.ttl_seconds)
        logger.info(f"Issued token {mask_token(token)} for user {owner_id}")
        return SessionToken.issued_now(token, owner_id, self.ttl_seconds)

    async def resolve(self, token: str | None) -> str:
        """
        Resolve a token to its owner.

        Args:
            token: Bearer token

        Returns:
            Owner user ID

        Raises:
            UnauthorizedError: If the token is missing, unknown, expired or revoked
        """
        if not token:
            raise UnauthorizedError()

        owner_id = await self.kv_store.get(token_key(token))
        if not owner_id:
            raise UnauthorizedError()
        return owner_id

    async def revoke(self, token: str | None) -> None:
        """
        Revoke a token.

        A token that was already revoked reports the same error as one that
        never existed.

        Raises:
            UnauthorizedError: If the token is missing or not live
        """
        if not token:
            raise UnauthorizedError()

        removed = await self.kv_store.delete(token_key(token))
        if not removed:
            raise UnauthorizedError()
        logger.info(f"Revoked token {mask_token(token)}")
