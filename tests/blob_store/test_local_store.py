"""
Tests for the local filesystem blob store.

Tests cover:
1. Payload written under a fresh UUID name
2. Root directory created on demand
3. No partial files left behind
4. Write failures surface as StorageUnavailableError
"""

from pathlib import Path

import pytest

from files_manager.core.blob_store.local_store import LocalBlobStore
from files_manager.utils.exceptions import StorageUnavailableError


@pytest.mark.unit
@pytest.mark.asyncio
class TestLocalBlobStore:
    """Blob writes."""

    async def test_store_writes_payload(self, blob_store, blob_root):
        locator = await blob_store.store(b"Hello Webstack!\n")

        path = Path(locator)
        assert path.parent == blob_root
        assert path.read_bytes() == b"Hello Webstack!\n"

    async def test_root_created_on_demand(self, tmp_path):
        root = tmp_path / "deep" / "nested" / "root"
        store = LocalBlobStore(root=root)

        await store.store(b"x")

        assert root.is_dir()

    async def test_fresh_name_per_write(self, blob_store, blob_root):
        first = await blob_store.store(b"same")
        second = await blob_store.store(b"same")

        assert first != second
        assert sorted(p.name for p in blob_root.iterdir()) == sorted(
            [Path(first).name, Path(second).name]
        )

    async def test_no_partial_files(self, blob_store, blob_root):
        await blob_store.store(b"payload")

        assert not [p for p in blob_root.iterdir() if p.name.endswith(".part")]

    async def test_empty_payload(self, blob_store):
        locator = await blob_store.store(b"")

        assert Path(locator).read_bytes() == b""

    async def test_root_is_a_file(self, tmp_path):
        root = tmp_path / "occupied"
        root.write_text("not a directory")
        store = LocalBlobStore(root=root)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await store.store(b"x")

        assert exc_info.value.status_code == 500
        assert exc_info.value.context["root"] == str(root)

    async def test_ping(self, blob_store, tmp_path):
        assert await blob_store.ping() is True

        occupied = tmp_path / "occupied"
        occupied.write_text("x")
        assert await LocalBlobStore(root=occupied).ping() is False
