"""
Access log storage strategies using Strategy Pattern.

Allows switching between different analytics stores:
- SQLite: durable, zero setup
- In-memory: development and tests
"""

import asyncio
import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import closing
from datetime import datetime, timezone
from typing import List, Optional

from shorturl_app.errors import StoreError
from shorturl_app.storage.models import AccessLogEntry

logger = logging.getLogger(__name__)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _to_db_timestamp(moment: datetime) -> str:
    # Fixed-width UTC ISO strings sort the same way the instants do
    return _as_utc(moment).isoformat(timespec="microseconds")


class AccessLogStrategy(ABC):
    """
    Abstract base class for access log stores.

    Append-only: entries are never updated or deleted here.
    """

    @abstractmethod
    async def append(self, entry: AccessLogEntry) -> None:
        """
        Store one access event.

        Raises:
            StoreError: if the event could not be persisted
        """
        pass

    @abstractmethod
    async def count_since(self, start: datetime, short_url_id: Optional[str] = None) -> int:
        """
        Count entries with access_time >= start.

        Args:
            start: Inclusive lower bound
            short_url_id: Restrict the count to one identifier; None counts all

        Returns:
            Number of matching entries (0 when none)
        """
        pass

    async def close(self) -> None:
        return None


class SQLiteAccessLogStore(AccessLogStrategy):
    """
    SQLite implementation for the access log.

    Pros:
    - Zero configuration (no external services)
    - Durable across restarts

    Cons:
    - Not optimized for analytics queries on very large logs
    - Not distributed

    Each call opens its own connection inside a worker thread.
    """

    def __init__(self, db_path: str = "analytics.db"):
        self.db_path = db_path
        self._init_database()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_database(self):
        """Create access log table and indexes if they don't exist"""
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS access_logs (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        short_url_id TEXT NOT NULL,
                        access_time TEXT NOT NULL
                    )
                """)
                conn.execute(
                    "CREATE INDEX IF NOT EXISTS idx_access_logs_short_url_time "
                    "ON access_logs (short_url_id, access_time)"
                )
                conn.execute(
                    "CREATE INDEX IF NOT EXISTS idx_access_logs_time "
                    "ON access_logs (access_time)"
                )
        except sqlite3.Error as e:
            raise StoreError(f"Initializing access log at {self.db_path!r} failed: {e}") from e
        logger.info("SQLite access log initialized at %s", self.db_path)

    async def append(self, entry: AccessLogEntry) -> None:
        await asyncio.to_thread(self._insert, entry)

    async def count_since(self, start: datetime, short_url_id: Optional[str] = None) -> int:
        return await asyncio.to_thread(self._count, start, short_url_id)

    def _insert(self, entry: AccessLogEntry) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    "INSERT INTO access_logs (short_url_id, access_time) VALUES (?, ?)",
                    (entry.short_url_id, _to_db_timestamp(entry.access_time)),
                )
        except sqlite3.Error as e:
            raise StoreError(f"Appending access log for {entry.short_url_id!r} failed: {e}") from e

    def _count(self, start: datetime, short_url_id: Optional[str]) -> int:
        query = "SELECT COUNT(*) FROM access_logs WHERE access_time >= ?"
        params = [_to_db_timestamp(start)]
        if short_url_id is not None:
            query += " AND short_url_id = ?"
            params.append(short_url_id)

        try:
            with closing(self._connect()) as conn:
                return conn.execute(query, params).fetchone()[0]
        except sqlite3.Error as e:
            raise StoreError(f"Counting access logs failed: {e}") from e


class InMemoryAccessLogStore(AccessLogStrategy):
    """
    Access log kept in a Python list.

    Lost on restart; used in development and tests.
    """

    def __init__(self):
        self.entries: List[AccessLogEntry] = []

    async def append(self, entry: AccessLogEntry) -> None:
        self.entries.append(entry)

    async def count_since(self, start: datetime, short_url_id: Optional[str] = None) -> int:
        start = _as_utc(start)
        return sum(
            1 for entry in self.entries
            if _as_utc(entry.access_time) >= start
            and (short_url_id is None or entry.short_url_id == short_url_id)
        )
