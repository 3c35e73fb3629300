"""
SQLite document store implementation.

Stores users and entries in two tables using aiosqlite. Entries keep an
autoincrement sequence column so listings come back in insertion order.
"""

import asyncio
import sqlite3
from datetime import datetime
from pathlib import Path

import aiosqlite

from files_manager.core.document_store.base import DocumentStore
from files_manager.models.entry import ROOT_PARENT_ID, Entry, EntryKind, normalize_parent_id
from files_manager.models.user import User
from files_manager.utils.exceptions import AlreadyExistsError, DocumentStoreError
from files_manager.utils.logger import get_logger

logger = get_logger(__name__)


class SQLiteDocumentStore(DocumentStore):
    """
    SQLite-based document store for users and entries.

    Features:
    - Fast local storage
    - Unique email constraint enforced by the database
    - Stable insertion ordering for listings
    """

    def __init__(self, db_path: str = "data/files_manager.db"):
        """
        Initialize SQLite document store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self.connection: aiosqlite.Connection | None = None
        # One shared connection: execute and commit/rollback must not interleave
        self._write_lock = asyncio.Lock()

        # Ensure directory exists
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async def connect(self) -> None:
        """Establish connection to SQLite."""
        if self.connection is None:
            self.connection = await aiosqlite.connect(self.db_path)
            self.connection.row_factory = aiosqlite.Row
            await self.connection.execute("PRAGMA journal_mode = WAL")
            await self.connection.commit()

    async def initialize(self) -> None:
        """Initialize database schema."""
        await self.connect()

        await self.connection.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
        """
        )

        await self.connection.execute(
            """
            CREATE TABLE IF NOT EXISTS files (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                owner_id TEXT NOT NULL,
                name TEXT NOT NULL,
                kind TEXT NOT NULL,
                parent_id TEXT NOT NULL,
                is_public INTEGER NOT NULL DEFAULT 0,
                blob_locator TEXT,
                created_at TEXT NOT NULL
            )
        """
        )

        await self.connection.execute(
            "CREATE INDEX IF NOT EXISTS idx_files_owner_parent ON files(owner_id, parent_id, seq)"
        )

        await self.connection.commit()
        logger.info(f"SQLite document store initialized at {self.db_path}")

    # ═══════════════════════════════════════════════════════════
    # USER OPERATIONS
    # ═══════════════════════════════════════════════════════════

    async def insert_user(self, user: User) -> User:
        await self.connect()

        try:
            await self._write(
                "INSERT INTO users (id, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
                (user.id, user.email, user.password_hash, user.created_at.isoformat()),
            )
        except sqlite3.IntegrityError as e:
            raise AlreadyExistsError(context={"email": user.email}) from e
        except sqlite3.Error as e:
            logger.error(f"Failed to insert user: {e}")
            raise DocumentStoreError("Failed to insert user", context={"error": str(e)}) from e

        return user

    async def get_user(self, user_id: str) -> User | None:
        return await self._fetch_user("SELECT * FROM users WHERE id = ?", user_id)

    async def find_user_by_email(self, email: str) -> User | None:
        return await self._fetch_user("SELECT * FROM users WHERE email = ?", email)

    async def _fetch_user(self, query: str, value: str) -> User | None:
        await self.connect()

        try:
            cursor = await self.connection.execute(query, (value,))
            row = await cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read user: {e}")
            raise DocumentStoreError("Failed to read user", context={"error": str(e)}) from e

        if not row:
            return None

        return User(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    async def count_users(self) -> int:
        return await self._count("users")

    # ═══════════════════════════════════════════════════════════
    # ENTRY OPERATIONS
    # ═══════════════════════════════════════════════════════════

    async def insert_entry(self, entry: Entry) -> Entry:
        await self.connect()

        try:
            await self._write(
                """
                INSERT INTO files (
                    id, owner_id, name, kind, parent_id, is_public, blob_locator, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.owner_id,
                    entry.name,
                    entry.kind.value,
                    str(entry.parent_id),
                    int(entry.is_public),
                    entry.blob_locator,
                    entry.created_at.isoformat(),
                ),
            )
        except sqlite3.Error as e:
            logger.error(f"Failed to insert entry: {e}")
            raise DocumentStoreError("Failed to insert entry", context={"error": str(e)}) from e

        return entry

    async def get_entry(self, entry_id: str) -> Entry | None:
        await self.connect()

        try:
            cursor = await self.connection.execute(
                "SELECT * FROM files WHERE id = ?", (str(entry_id),)
            )
            row = await cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read entry: {e}")
            raise DocumentStoreError("Failed to read entry", context={"error": str(e)}) from e

        if not row:
            return None

        return self._row_to_entry(row)

    async def list_entries(
        self,
        owner_id: str,
        parent_id: str | int,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Entry]:
        if skip < 0 or limit <= 0:
            return []

        await self.connect()

        try:
            cursor = await self.connection.execute(
                """
                SELECT * FROM files
                WHERE owner_id = ? AND parent_id = ?
                ORDER BY seq
                LIMIT ? OFFSET ?
                """,
                (owner_id, str(normalize_parent_id(parent_id)), limit, skip),
            )
            rows = await cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list entries: {e}")
            raise DocumentStoreError("Failed to list entries", context={"error": str(e)}) from e

        return [self._row_to_entry(row) for row in rows]

    async def count_entries(self) -> int:
        return await self._count("files")

    # ═══════════════════════════════════════════════════════════
    # UTILITY
    # ═══════════════════════════════════════════════════════════

    async def _write(self, query: str, params: tuple) -> None:
        """Run one statement and commit it, or roll it back, under the write lock."""
        async with self._write_lock:
            try:
                await self.connection.execute(query, params)
                await self.connection.commit()
            except sqlite3.Error:
                await self.connection.rollback()
                raise

    async def _count(self, table: str) -> int:
        await self.connect()

        try:
            cursor = await self.connection.execute(f"SELECT COUNT(*) FROM {table}")
            row = await cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to count {table}: {e}")
            raise DocumentStoreError(f"Failed to count {table}", context={"error": str(e)}) from e

        return row[0] if row else 0

    async def ping(self) -> bool:
        try:
            await self.connect()
            await self.connection.execute("SELECT 1")
            return True
        except sqlite3.Error as e:
            logger.warning(f"SQLite ping failed: {e}")
            return False

    async def close(self) -> None:
        """Close database connection."""
        if self.connection:
            await self.connection.close()
            self.connection = None

    def _row_to_entry(self, row: aiosqlite.Row) -> Entry:
        """Convert database row to Entry object."""
        parent_id = row["parent_id"]
        return Entry(
            id=row["id"],
            owner_id=row["owner_id"],
            name=row["name"],
            kind=EntryKind(row["kind"]),
            parent_id=ROOT_PARENT_ID if parent_id == str(ROOT_PARENT_ID) else parent_id,
            is_public=bool(row["is_public"]),
            blob_locator=row["blob_locator"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
