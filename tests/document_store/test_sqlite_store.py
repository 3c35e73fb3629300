"""
Tests for the SQLite document store.

Tests cover:
1. User insert/lookup and the unique email constraint
2. Entry insert/lookup, including root parent round-trip
3. Owner/parent filtered listing with skip/limit
4. Counters, ping and persistence across connections
"""

import asyncio

import pytest

from files_manager.core.document_store.sqlite_store import SQLiteDocumentStore
from files_manager.models.entry import ROOT_PARENT_ID, Entry, EntryKind
from files_manager.models.user import User
from files_manager.utils.exceptions import AlreadyExistsError


def make_user(user_id: str, email: str) -> User:
    return User(id=user_id, email=email, password_hash="0" * 40)


def make_entry(entry_id: str, owner_id: str = "alice", parent_id=ROOT_PARENT_ID, **kwargs) -> Entry:
    kwargs.setdefault("name", entry_id)
    kwargs.setdefault("kind", EntryKind.FOLDER)
    return Entry(id=entry_id, owner_id=owner_id, parent_id=parent_id, **kwargs)


@pytest.mark.unit
@pytest.mark.asyncio
class TestUsers:
    """User records."""

    async def test_insert_and_get(self, document_store):
        await document_store.insert_user(make_user("u1", "alice@x.com"))

        user = await document_store.get_user("u1")

        assert user.email == "alice@x.com"
        assert user.password_hash == "0" * 40

    async def test_find_by_email(self, document_store):
        await document_store.insert_user(make_user("u1", "alice@x.com"))

        assert (await document_store.find_user_by_email("alice@x.com")).id == "u1"
        assert await document_store.find_user_by_email("bob@x.com") is None

    async def test_duplicate_email(self, document_store):
        await document_store.insert_user(make_user("u1", "alice@x.com"))

        with pytest.raises(AlreadyExistsError):
            await document_store.insert_user(make_user("u2", "alice@x.com"))

        assert await document_store.count_users() == 1

    async def test_get_missing(self, document_store):
        assert await document_store.get_user("nobody") is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestEntries:
    """Entry records."""

    async def test_root_parent_round_trip(self, document_store):
        await document_store.insert_entry(make_entry("e1"))

        entry = await document_store.get_entry("e1")

        assert entry.parent_id == ROOT_PARENT_ID
        assert entry.kind == EntryKind.FOLDER
        assert entry.blob_locator is None

    async def test_leaf_round_trip(self, document_store):
        await document_store.insert_entry(
            make_entry(
                "e2",
                parent_id="e1",
                kind=EntryKind.IMAGE,
                is_public=True,
                blob_locator="/tmp/files_manager/abc",
            )
        )

        entry = await document_store.get_entry("e2")

        assert entry.parent_id == "e1"
        assert entry.is_public is True
        assert entry.blob_locator == "/tmp/files_manager/abc"

    async def test_get_missing(self, document_store):
        assert await document_store.get_entry("missing") is None

    async def test_list_filters_owner_and_parent(self, document_store):
        await document_store.insert_entry(make_entry("a1"))
        await document_store.insert_entry(make_entry("b1", owner_id="bob"))
        await document_store.insert_entry(make_entry("a2", parent_id="a1"))
        await document_store.insert_entry(make_entry("a3"))

        listed = await document_store.list_entries("alice", ROOT_PARENT_ID)

        assert [e.id for e in listed] == ["a1", "a3"]

    async def test_list_accepts_string_root(self, document_store):
        await document_store.insert_entry(make_entry("a1"))

        assert len(await document_store.list_entries("alice", "0")) == 1

    async def test_list_skip_and_limit(self, document_store):
        for i in range(7):
            await document_store.insert_entry(make_entry(f"e{i}"))

        listed = await document_store.list_entries("alice", 0, skip=2, limit=3)

        assert [e.id for e in listed] == ["e2", "e3", "e4"]

    @pytest.mark.parametrize(("skip", "limit"), [(-1, 20), (0, 0)])
    async def test_list_invalid_window(self, document_store, skip, limit):
        await document_store.insert_entry(make_entry("e1"))

        assert await document_store.list_entries("alice", 0, skip=skip, limit=limit) == []

    async def test_count_entries(self, document_store):
        assert await document_store.count_entries() == 0
        await document_store.insert_entry(make_entry("e1"))
        assert await document_store.count_entries() == 1


@pytest.mark.unit
@pytest.mark.asyncio
class TestLifecycle:
    """Connection management."""

    async def test_ping(self, document_store):
        assert await document_store.ping() is True

    async def test_data_survives_reopen(self, tmp_path):
        db_path = str(tmp_path / "reopen.db")
        store = SQLiteDocumentStore(db_path=db_path)
        await store.initialize()
        await store.insert_user(make_user("u1", "alice@x.com"))
        await store.close()

        reopened = SQLiteDocumentStore(db_path=db_path)
        await reopened.initialize()
        try:
            assert (await reopened.get_user("u1")).email == "alice@x.com"
        finally:
            await reopened.close()


@pytest.mark.unit
@pytest.mark.asyncio
class TestConcurrentWrites:
    """Writes sharing the connection never undo each other."""

    async def test_duplicate_user_does_not_roll_back_entry(self, document_store):
        await document_store.insert_user(make_user("u1", "alice@x.com"))

        results = await asyncio.gather(
            document_store.insert_user(make_user("u2", "alice@x.com")),
            document_store.insert_entry(make_entry("e1")),
            return_exceptions=True,
        )

        assert isinstance(results[0], AlreadyExistsError)
        assert results[1].id == "e1"
        assert await document_store.get_entry("e1") is not None

    async def test_many_interleaved_writes(self, document_store):
        await document_store.insert_user(make_user("u0", "alice@x.com"))

        calls = []
        for i in range(20):
            calls.append(document_store.insert_user(make_user(f"dup{i}", "alice@x.com")))
            calls.append(document_store.insert_entry(make_entry(f"e{i}")))
        results = await asyncio.gather(*calls, return_exceptions=True)

        assert sum(isinstance(r, AlreadyExistsError) for r in results) == 20
        assert await document_store.count_entries() == 20
        assert await document_store.count_users() == 1
