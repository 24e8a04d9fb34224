"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import os

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["ACCESS_LOG_BACKEND"] = "memory"
os.environ["BASE_URL"] = "http://sho.rt"
os.environ["CACHE_TTL"] = "3600"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from main import app
from shorturl_app.cache.strategies import InMemoryCache
from shorturl_app.database.connection import Base, SessionLocal, engine, get_db
from shorturl_app.dependencies import get_access_log, get_cache
from shorturl_app.services.analytics_service import AnalyticsService
from shorturl_app.services.short_code_strategies import Base62ShortCodeStrategy
from shorturl_app.services.url_service import URLService
from shorturl_app.storage.strategies import InMemoryAccessLogStore
from shorturl_app.storage.url_records import UrlRecordStore

BASE_URL = "http://sho.rt"
CACHE_TTL = 3600


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def access_log():
    return InMemoryAccessLogStore()


@pytest.fixture
def url_store(db_session):
    return UrlRecordStore(db_session)


@pytest.fixture
def url_service(url_store, cache):
    return URLService(
        url_store=url_store,
        short_code_strategy=Base62ShortCodeStrategy(),
        base_url=BASE_URL,
        cache_ttl=CACHE_TTL,
        cache=cache,
    )


@pytest.fixture
def analytics_service(access_log, cache):
    return AnalyticsService(access_logs=access_log, cache_ttl=CACHE_TTL, cache=cache)


@pytest.fixture(scope="function")
def client(db_session, cache, access_log):
    """
    Test client with database, cache and access log overridden.
    This is the main fixture that HTTP tests use.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_access_log] = lambda: access_log

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
