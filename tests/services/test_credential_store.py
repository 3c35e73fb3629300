"""
Tests for CredentialStore.
"""

import pytest

from files_manager.services.credential_store import CredentialStore
from files_manager.utils.credentials import hash_password
from files_manager.utils.exceptions import (
    AlreadyExistsError,
    MissingEmailError,
    MissingPasswordError,
    UnauthorizedError,
)


@pytest.fixture
def credentials(document_store):
    return CredentialStore(document_store)


@pytest.mark.unit
@pytest.mark.asyncio
class TestRegister:
    """User registration."""

    async def test_register_returns_user(self, credentials):
        user = await credentials.register("alice@x.com", "secret")

        assert user.id
        assert user.email == "alice@x.com"
        assert user.password_hash == hash_password("secret")
        assert user.to_public_dict() == {"id": user.id, "email": "alice@x.com"}

    async def test_register_duplicate_email(self, credentials):
        await credentials.register("alice@x.com", "secret")

        with pytest.raises(AlreadyExistsError) as exc_info:
            await credentials.register("alice@x.com", "other")

        assert exc_info.value.message == "Already exists"

    @pytest.mark.parametrize("email", [None, ""])
    async def test_register_missing_email(self, credentials, email):
        with pytest.raises(MissingEmailError):
            await credentials.register(email, "secret")

    async def test_register_missing_password(self, credentials):
        with pytest.raises(MissingPasswordError):
            await credentials.register("alice@x.com", None)

    async def test_register_missing_both_reports_email(self, credentials):
        with pytest.raises(MissingEmailError):
            await credentials.register(None, None)


@pytest.mark.unit
@pytest.mark.asyncio
class TestVerify:
    """Credential verification."""

    async def test_verify_good_credentials(self, credentials):
        registered = await credentials.register("alice@x.com", "secret")

        user = await credentials.verify("alice@x.com", "secret")

        assert user.id == registered.id

    async def test_verify_wrong_password(self, credentials):
        await credentials.register("alice@x.com", "secret")

        with pytest.raises(UnauthorizedError):
            await credentials.verify("alice@x.com", "wrong")

    async def test_verify_unknown_user(self, credentials):
        with pytest.raises(UnauthorizedError):
            await credentials.verify("nobody@x.com", "secret")

    async def test_get_by_id(self, credentials):
        registered = await credentials.register("alice@x.com", "secret")

        assert (await credentials.get(registered.id)).email == "alice@x.com"
        assert await credentials.get("missing") is None
