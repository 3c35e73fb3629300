"""
Shared test fixtures for all test modules.

Stores are real implementations backed by temporary directories; the token
store uses an in-memory backend driven by a controllable clock so expiry can
be tested without sleeping.
"""

from collections.abc import AsyncGenerator

import pytest

from files_manager.config import AuthConfig, Config, DatabaseConfig, StorageConfig
from files_manager.core.blob_store.local_store import LocalBlobStore
from files_manager.core.document_store.sqlite_store import SQLiteDocumentStore
from files_manager.core.kv_store.memory_store import MemoryKeyValueStore
from files_manager.services.files_engine import FilesManagerEngine


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def kv_store(clock) -> MemoryKeyValueStore:
    return MemoryKeyValueStore(clock=clock)


@pytest.fixture
async def document_store(tmp_path) -> AsyncGenerator[SQLiteDocumentStore, None]:
    store = SQLiteDocumentStore(db_path=str(tmp_path / "db" / "files_manager.db"))
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def blob_root(tmp_path):
    return tmp_path / "blobs"


@pytest.fixture
def blob_store(blob_root) -> LocalBlobStore:
    return LocalBlobStore(root=blob_root)


@pytest.fixture
def config(tmp_path, blob_root) -> Config:
    return Config(
        kv_backend="memory",
        database=DatabaseConfig(path=str(tmp_path / "db" / "files_manager.db")),
        storage=StorageConfig(folder_path=str(blob_root)),
        auth=AuthConfig(token_ttl_seconds=86400, page_size=20),
    )


@pytest.fixture
async def engine(kv_store, document_store, blob_store, config) -> AsyncGenerator:
    files_engine = FilesManagerEngine(
        kv_store=kv_store,
        document_store=document_store,
        blob_store=blob_store,
        config=config,
    )
    await files_engine.initialize()
    yield files_engine
    await files_engine.close()


@pytest.fixture
async def alice(engine):
    """Registered user alice@x.com with an open session."""
    user = await engine.credentials.register("alice@x.com", "secret")
    session = await engine.token_manager.issue(user.id)
    return user, session.token


@pytest.fixture
async def bob(engine):
    """Registered user bob@x.com with an open session."""
    user = await engine.credentials.register("bob@x.com", "hunter2")
    session = await engine.token_manager.issue(user.id)
    return user, session.token
