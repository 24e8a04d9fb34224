"""
Durable store for URL records (long URL <-> short identifiers).

Wraps a synchronous SQLAlchemy session. Each call runs in Starlette's
threadpool so a slow database does not stall other requests on the loop.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from shorturl_app.errors import StoreError
from shorturl_app.models.url import ShortUrl, UrlRecord

logger = logging.getLogger(__name__)


class UrlRecordStore:
    def __init__(self, db: Session):
        self.db = db

    async def find_by_long_url(self, long_url: str) -> Optional[UrlRecord]:
        """Exact match on long_url."""
        stmt = select(UrlRecord).where(UrlRecord.long_url == long_url)
        return await run_in_threadpool(self._first, stmt, "long_url lookup")

    async def find_by_short_url_id(self, short_url_id: str) -> Optional[UrlRecord]:
        """
        Record owning ``short_url_id``.

        If several entries carry the identifier, the earliest inserted wins.
        """
        stmt = (
            select(UrlRecord)
            .join(ShortUrl, ShortUrl.record_id == UrlRecord.id)
            .where(ShortUrl.short_url_id == short_url_id)
            .order_by(ShortUrl.id)
            .limit(1)
        )
        return await run_in_threadpool(self._first, stmt, "short_url_id lookup")

    async def save(self, record: UrlRecord) -> UrlRecord:
        """Persist a new or mutated record in a single commit."""
        return await run_in_threadpool(self._save, record)

    def _first(self, stmt, what: str) -> Optional[UrlRecord]:
        try:
            return self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"URL record {what} failed: {e}") from e

    def _save(self, record: UrlRecord) -> UrlRecord:
        long_url = record.long_url  # attributes expire on rollback
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Saving URL record for {long_url!r} failed: {e}") from e
        logger.debug("Saved URL record %s (%d short urls)", record.long_url_id, len(record.short_urls))
        return record
