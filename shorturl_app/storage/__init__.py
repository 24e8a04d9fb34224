"""
Durable stores.

- Access log: Strategy Pattern for pluggable analytics storage, kept apart
  from transactional data.
- URL records: SQLAlchemy-backed store for long URL <-> short identifiers.
"""

from .models import AccessLogEntry
from .strategies import AccessLogStrategy, SQLiteAccessLogStore, InMemoryAccessLogStore
from .factory import AccessLogStoreFactory, AccessLogBackend
from .url_records import UrlRecordStore

__all__ = [
    "AccessLogEntry",
    "AccessLogStrategy",
    "SQLiteAccessLogStore",
    "InMemoryAccessLogStore",
    "AccessLogStoreFactory",
    "AccessLogBackend",
    "UrlRecordStore",
]
