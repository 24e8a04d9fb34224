"""
Tests for cache strategies and the best-effort helpers.
"""
import asyncio

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from shorturl_app.cache import cache_get, cache_set
from shorturl_app.cache.factory import CacheBackend, CacheFactory
from shorturl_app.cache.strategies import InMemoryCache, NullCache, RedisCache
from shorturl_app.errors import CacheError


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class FakeRedis:
    """Just enough of redis.asyncio.Redis for RedisCache"""

    def __init__(self):
        self.data = {}
        self.expirations = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value
        self.expirations[key] = ex
        return True

    async def aclose(self):
        self.closed = True


class DownRedis(FakeRedis):
    async def get(self, key):
        raise RedisConnectionError("Connection refused")

    async def set(self, key, value, ex=None):
        raise RedisConnectionError("Connection refused")


class TestInMemoryCache:

    def test_set_then_get(self):
        cache = InMemoryCache()
        asyncio.run(cache.set("shortUrl:abc", "http://cloudflare.com", ttl=60))

        assert asyncio.run(cache.get("shortUrl:abc")) == "http://cloudflare.com"
        assert asyncio.run(cache.exists("shortUrl:abc")) is True

    def test_missing_key(self):
        cache = InMemoryCache()
        assert asyncio.run(cache.get("nope")) is None

    def test_entries_expire_after_ttl(self):
        clock = FakeClock()
        cache = InMemoryCache(clock=clock)
        asyncio.run(cache.set("k", "v", ttl=10))

        clock.now += 9
        assert asyncio.run(cache.get("k")) == "v"

        clock.now += 1
        assert asyncio.run(cache.get("k")) is None
        assert asyncio.run(cache.exists("k")) is False

    def test_last_writer_wins(self):
        cache = InMemoryCache()
        asyncio.run(cache.set("k", "first", ttl=60))
        asyncio.run(cache.set("k", "second", ttl=60))

        assert asyncio.run(cache.get("k")) == "second"

    def test_clear(self):
        cache = InMemoryCache()
        asyncio.run(cache.set("a", "1", ttl=60))
        asyncio.run(cache.set("b", "2", ttl=60))

        assert asyncio.run(cache.clear()) is True
        assert asyncio.run(cache.get("a")) is None
        assert asyncio.run(cache.get("b")) is None


class TestNullCache:

    def test_always_misses(self):
        cache = NullCache()
        asyncio.run(cache.set("k", "v", ttl=60))

        assert asyncio.run(cache.get("k")) is None


class TestRedisCache:

    def test_set_passes_ttl_to_redis(self):
        client = FakeRedis()
        cache = RedisCache(client)

        assert asyncio.run(cache.set("shortUrl:abc", "http://cloudflare.com", ttl=3600)) is True
        assert client.expirations["shortUrl:abc"] == 3600
        assert asyncio.run(cache.get("shortUrl:abc")) == "http://cloudflare.com"

    def test_transport_errors_become_cache_errors(self):
        cache = RedisCache(DownRedis())

        with pytest.raises(CacheError):
            asyncio.run(cache.get("k"))
        with pytest.raises(CacheError):
            asyncio.run(cache.set("k", "v", ttl=60))

    def test_close_releases_client(self):
        client = FakeRedis()
        asyncio.run(RedisCache(client).close())
        assert client.closed is True


class TestBestEffortHelpers:

    def test_read_failure_is_a_miss(self):
        assert asyncio.run(cache_get(RedisCache(DownRedis()), "k")) is None

    def test_write_failure_is_swallowed(self):
        assert asyncio.run(cache_set(RedisCache(DownRedis()), "k", "v", 60)) is False

    def test_no_cache_configured(self):
        assert asyncio.run(cache_get(None, "k")) is None
        assert asyncio.run(cache_set(None, "k", "v", 60)) is False


class TestCacheFactory:

    def setup_method(self):
        CacheFactory.clear_instance()

    def teardown_method(self):
        CacheFactory.clear_instance()

    def test_creates_memory_cache(self):
        assert isinstance(CacheFactory.create(CacheBackend.MEMORY), InMemoryCache)

    def test_creates_null_cache(self):
        assert isinstance(CacheFactory.create(CacheBackend.NULL), NullCache)

    def test_creates_redis_cache_without_connecting(self):
        assert isinstance(CacheFactory.create(CacheBackend.REDIS), RedisCache)

    def test_singleton(self):
        first = CacheFactory.create(CacheBackend.MEMORY)
        assert CacheFactory.create(CacheBackend.NULL) is first
