"""
Local filesystem blob store.

Blobs are written to a temporary sibling and renamed into place, so a reader
of the returned locator never sees a partially written file.
"""

import asyncio
import os
from pathlib import Path

from files_manager.core.blob_store.base import BlobStore
from files_manager.utils.exceptions import StorageUnavailableError
from files_manager.utils.id_generator import generate_blob_name
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class LocalBlobStore(BlobStore):
    """Stores each blob as one file named by a random UUID under ``root``."""

    def __init__(self, root: str | Path = "/tmp/files_manager"):
        """
        Initialize local blob store.

        Args:
            root: Directory that receives the blobs (created on demand)
        """
        self.root = Path(root)

    def _write(self, raw: bytes) -> str:
        self.root.mkdir(parents=True, exist_ok=True)

        name = generate_blob_name()
        target = self.root / name
        partial = self.root / f".{name}.part"

        try:
            with open(partial, "wb") as f:
                f.write(raw)
                f.flush()
                os.fsync(f.fileno())
            os.replace(partial, target)
        except OSError:
            partial.unlink(missing_ok=True)
            raise

        return str(target)

    async def store(self, raw: bytes) -> str:
        try:
            locator = await asyncio.to_thread(self._write, raw)
        except OSError as e:
            logger.error(f"Failed to write blob under {self.root}: {e}")
            raise StorageUnavailableError(
                "Internal Server Error", context={"root": str(self.root), "error": str(e)}
            ) from e

        logger.debug(f"Stored blob of {len(raw)} bytes at {locator}")
        return locator

    async def ping(self) -> bool:
        try:
            await asyncio.to_thread(self.root.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Blob root not writable: {e}")
            return False
        return os.access(self.root, os.W_OK)
