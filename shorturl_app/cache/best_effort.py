"""
Cache access that never fails a request.

A CacheError on read is reported as a miss and on write as a skipped write.
"""

import logging
from typing import Optional

from shorturl_app.errors import CacheError
from .strategies import CacheStrategy

logger = logging.getLogger(__name__)


async def cache_get(cache: Optional[CacheStrategy], key: str) -> Optional[str]:
    if cache is None:
        return None
    try:
        return await cache.get(key)
    except CacheError as e:
        logger.warning("Cache read failed, treating as miss: %s", e.message)
        return None


async def cache_set(cache: Optional[CacheStrategy], key: str, value: str, ttl: int) -> bool:
    if cache is None:
        return False
    try:
        return await cache.set(key, value, ttl=ttl)
    except CacheError as e:
        logger.warning("Cache write skipped: %s", e.message)
        return False
