"""
Cache strategies using Strategy Pattern.
Allows switching between different cache backends (Redis, In-Memory, Null).
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Tuple
import time

from redis.exceptions import RedisError

from shorturl_app.errors import CacheError


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.

    The cache is never the source of truth: every value stored here can be
    rebuilt from the durable stores. Backends raise CacheError on transport
    failure and the pipelines treat that as a miss.

    All methods are async because cache operations involve I/O (network for Redis).
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL (Time To Live).

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (default: 1 hour)

        Returns:
            True if successful, False otherwise
        """
        pass

    async def close(self) -> None:
        """Release any underlying connection."""
        return None


class RedisCache(CacheStrategy):
    """
    Redis cache implementation on top of ``redis.asyncio``.

    Distributed (servers share the cache), TTL enforced by Redis itself,
    non-blocking I/O. Used in production environments.
    """

    def __init__(self, redis_client):
        """
        Args:
            redis_client: ``redis.asyncio.Redis`` instance created with
                ``decode_responses=True``
        """
        self.redis = redis_client

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis get failed for {key!r}: {e}") from e

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        try:
            return bool(await self.redis.set(key, value, ex=ttl))
        except (RedisError, OSError) as e:
            raise CacheError(f"Redis set failed for {key!r}: {e}") from e

    async def close(self) -> None:
        await self.redis.aclose()


class InMemoryCache(CacheStrategy):
    """
    In-memory cache implementation using a Python dict.

    Not distributed and lost on restart; good for development and tests.
    Expired entries are dropped lazily when read.
    """

    def __init__(self, clock=time.monotonic):
        self._cache: Dict[str, Tuple[str, float]] = {}
        self._clock = clock

    def _live(self, key: str) -> Optional[str]:
        entry = self._cache.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._cache[key]
            return None
        return value

    async def get(self, key: str) -> Optional[str]:
        return self._live(key)

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        self._cache[key] = (value, self._clock() + ttl)
        return True

    # Not part of CacheStrategy
    async def exists(self, key: str) -> bool:
        return self._live(key) is not None

    async def clear(self) -> bool:
        self._cache.clear()
        return True


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.

    Every read is a miss, so every request goes to the durable stores.
    """

    async def get(self, key: str) -> Optional[str]:
        return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        return True
