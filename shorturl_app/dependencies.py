"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the cache and the access log
store, and builds the per-request pipelines on top of them.

Pattern: Dependency Injection
- Pipelines never reach for process-wide handles themselves
- Easy to test (override get_cache / get_access_log / get_db)
- Flexible (swap implementations via config)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from shorturl_app.cache.factory import CacheFactory, CacheBackend
from shorturl_app.cache.strategies import CacheStrategy
from shorturl_app.config import settings
from shorturl_app.database.connection import get_db
from shorturl_app.services.analytics_service import AnalyticsService
from shorturl_app.services.short_code_factory import ShortCodeFactory
from shorturl_app.services.short_code_strategies import ShortCodeStrategy
from shorturl_app.services.url_service import URLService
from shorturl_app.storage.factory import AccessLogStoreFactory, AccessLogBackend
from shorturl_app.storage.strategies import AccessLogStrategy
from shorturl_app.storage.url_records import UrlRecordStore


@lru_cache()
def get_cache() -> CacheStrategy:
    """
    Get cache instance (singleton).

    Factory gets config from settings internally.
    @lru_cache ensures this is called only once.
    """
    backend = CacheBackend(settings.cache_backend)
    return CacheFactory.create(backend)


@lru_cache()
def get_access_log() -> AccessLogStrategy:
    """Get access log store instance (singleton)."""
    backend = AccessLogBackend(settings.access_log_backend)
    return AccessLogStoreFactory.create(backend)


def get_short_code_strategy() -> ShortCodeStrategy:
    return ShortCodeFactory.create_strategy()


def get_url_store(db: Session = Depends(get_db)) -> UrlRecordStore:
    return UrlRecordStore(db)


def get_url_service(
    url_store: UrlRecordStore = Depends(get_url_store),
    cache: CacheStrategy = Depends(get_cache),
    short_code_strategy: ShortCodeStrategy = Depends(get_short_code_strategy),
) -> URLService:
    """Resolution pipeline with all dependencies injected."""
    return URLService(
        url_store=url_store,
        short_code_strategy=short_code_strategy,
        base_url=settings.base_url,
        cache_ttl=settings.cache_ttl,
        cache=cache,
    )


def get_analytics_service(
    access_logs: AccessLogStrategy = Depends(get_access_log),
    cache: CacheStrategy = Depends(get_cache),
) -> AnalyticsService:
    """Analytics pipeline with all dependencies injected."""
    return AnalyticsService(
        access_logs=access_logs,
        cache_ttl=settings.cache_ttl,
        cache=cache,
    )
