"""
Session token model.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

TOKEN_KEY_PREFIX = "auth_"
DEFAULT_TOKEN_TTL_SECONDS = 86400


def token_key(token: str) -> str:
    """Key under which a token is stored in the key-value store."""
    return f"{TOKEN_KEY_PREFIX}{token}"


class SessionToken(BaseModel):
    """
    Issued bearer token.

    Only returned to the caller at issuance; the key-value store is the sole
    owner of the ``token -> owner_id`` mapping afterwards.
    """

    token: str = Field(..., description="Opaque bearer token")
    owner_id: str = Field(..., description="User the token authenticates")
    expires_at: datetime = Field(..., description="Moment the store drops the token")

    @classmethod
    def issued_now(cls, token: str, owner_id: str, ttl_seconds: int) -> "SessionToken":
        return cls(
            token=token,
            owner_id=owner_id,
            expires_at=datetime.now() + timedelta(seconds=ttl_seconds),
        )
