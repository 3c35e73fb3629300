"""
Tests for FilesManagerEngine and AuthService wiring.
"""

import base64

import pytest

from files_manager.core.blob_store.local_store import LocalBlobStore
from files_manager.services.files_engine import FilesManagerEngine
from files_manager.utils.exceptions import AlreadyExistsError, UnauthorizedError


def basic(email: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{email}:{password}".encode()).decode()


@pytest.mark.integration
@pytest.mark.asyncio
class TestFilesManagerEngine:
    """Status, statistics and session flow through the engine."""

    async def test_status(self, engine):
        assert await engine.get_status() == {"redis": True, "db": True, "storage": True}

    async def test_statistics(self, engine, alice, bob):
        _, token = alice
        await engine.files.upload(token, "Photos", "folder")

        assert await engine.get_statistics() == {"users": 2, "files": 1}

    async def test_register_connect_me_disconnect(self, engine):
        user = await engine.auth.register("carol@x.com", "pw")

        session = await engine.auth.connect(basic("carol@x.com", "pw"))
        me = await engine.auth.me(session.token)
        await engine.auth.disconnect(session.token)

        assert me.id == user.id
        with pytest.raises(UnauthorizedError):
            await engine.auth.me(session.token)

    async def test_register_twice(self, engine):
        await engine.auth.register("carol@x.com", "pw")

        with pytest.raises(AlreadyExistsError):
            await engine.auth.register("carol@x.com", "other")

    async def test_connect_unknown_user(self, engine):
        with pytest.raises(UnauthorizedError):
            await engine.auth.connect(basic("nobody@x.com", "pw"))

    async def test_me_for_unknown_owner(self, engine):
        session = await engine.token_manager.issue("ghost")

        with pytest.raises(UnauthorizedError):
            await engine.auth.me(session.token)

    async def test_tokens_use_configured_ttl(self, engine, alice, clock):
        _, token = alice
        clock.advance(engine.config.auth.token_ttl_seconds)

        with pytest.raises(UnauthorizedError):
            await engine.files.list_entries(token)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_status_reports_unwritable_storage(kv_store, document_store, config, tmp_path):
    occupied = tmp_path / "occupied"
    occupied.write_text("not a directory")
    files_engine = FilesManagerEngine(
        kv_store=kv_store,
        document_store=document_store,
        blob_store=LocalBlobStore(root=occupied),
        config=config,
    )

    status = await files_engine.get_status()

    assert status == {"redis": True, "db": True, "storage": False}
