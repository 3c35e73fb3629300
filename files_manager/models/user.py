"""
User model owned by the credential store.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class User(BaseModel):
    """Registered account. Immutable once created."""

    id: str = Field(..., description="Unique user ID")
    email: str = Field(..., min_length=1, description="Unique login email")
    password_hash: str = Field(..., description="SHA-1 hex digest of the password")
    created_at: datetime = Field(default_factory=datetime.now, description="Registration timestamp")

    def to_public_dict(self) -> dict[str, Any]:
        """Serialize without the password hash."""
        return {"id": self.id, "email": self.email}
