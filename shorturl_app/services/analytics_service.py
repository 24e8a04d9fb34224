import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shorturl_app.cache import CacheStrategy, cache_get, cache_set
from shorturl_app.schemas.url import AnalyticsResponse
from shorturl_app.storage.strategies import AccessLogStrategy

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimeFrame(str, Enum):
    """Analytics window. Anything unrecognized means ALL."""
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    ALL = "all"

    @classmethod
    def normalize(cls, value) -> "TimeFrame":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


def calculate_start_date(time_frame, now: Optional[datetime] = None) -> datetime:
    """
    Inclusive lower bound of the analytics window, in UTC.

    "24h" -> now - 1 day, "7d" -> now - 7 days, anything else -> epoch.
    """
    time_frame = TimeFrame.normalize(time_frame)
    now = now or datetime.now(timezone.utc)

    if time_frame is TimeFrame.LAST_24_HOURS:
        return now - timedelta(days=1)
    if time_frame is TimeFrame.LAST_7_DAYS:
        return now - timedelta(days=7)
    return EPOCH


def analytics_cache_key(short_url_id: str, time_frame: TimeFrame) -> str:
    return f"analytics:{short_url_id}:{time_frame.value}"


class AnalyticsService:
    """
    Analytics pipeline: cached access counts per short identifier.

    Counts are scoped to the requested identifier. An identifier that was
    never accessed (or never existed) simply counts 0.
    """

    def __init__(
        self,
        access_logs: AccessLogStrategy,
        cache_ttl: int,
        cache: Optional[CacheStrategy] = None,
    ):
        if cache_ttl <= 0:
            raise ValueError(f"cache_ttl must be a positive number of seconds, got {cache_ttl}")
        self.access_logs = access_logs
        self.cache_ttl = cache_ttl
        self.cache = cache

    async def generate_analytics(self, short_url_id: str, time_frame=None) -> AnalyticsResponse:
        """
        Access count for ``short_url_id`` over ``time_frame``.

        A cached result is returned verbatim; its timeFrame is authoritative.
        On a miss the access log is counted and the result written through.

        Raises:
            StoreError: the access log could not be queried
        """
        canonical = TimeFrame.normalize(time_frame)
        cache_key = analytics_cache_key(short_url_id, canonical)

        cached = await cache_get(self.cache, cache_key)
        if cached:
            try:
                return AnalyticsResponse.model_validate_json(cached)
            except PydanticValidationError:
                logger.warning("Discarding unreadable analytics cache entry %s", cache_key)

        start = calculate_start_date(canonical)
        count = await self.access_logs.count_since(start, short_url_id=short_url_id)

        result = AnalyticsResponse(time_frame=canonical.value, access_count=count)
        await cache_set(self.cache, cache_key, result.model_dump_json(by_alias=True), self.cache_ttl)

        return result
