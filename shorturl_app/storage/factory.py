"""
Factory for creating access log store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum

from .strategies import AccessLogStrategy, SQLiteAccessLogStore, InMemoryAccessLogStore
from shorturl_app.config import settings

logger = logging.getLogger(__name__)


class AccessLogBackend(Enum):
    """Available access log backends"""
    SQLITE = "sqlite"
    MEMORY = "memory"


class AccessLogStoreFactory:
    """
    Simple factory for creating access log stores.

    Gets configuration from settings (not passed as parameters).
    """

    _instance: AccessLogStrategy = None  # Single cached instance

    @classmethod
    def create(cls, backend: AccessLogBackend) -> AccessLogStrategy:
        """Create or return the cached access log store."""
        if cls._instance is not None:
            return cls._instance

        if backend == AccessLogBackend.SQLITE:
            cls._instance = SQLiteAccessLogStore(db_path=settings.access_log_sqlite_path)

        elif backend == AccessLogBackend.MEMORY:
            cls._instance = InMemoryAccessLogStore()
            logger.info("In-memory access log initialized")

        else:
            raise ValueError(f"Unknown access log backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
