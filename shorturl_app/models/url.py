from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shorturl_app.database.connection import Base


class UrlRecord(Base):
    """
    One long URL and every short identifier ever issued for it.

    long_url is unique: re-shortening appends to short_urls instead of
    creating a second record. The unique constraint also makes the losing
    side of two concurrent first-time shortenings fail at commit.
    """
    __tablename__ = "url_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    long_url_id = Column(String(36), unique=True, nullable=False)
    long_url = Column(Text, unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    short_urls = relationship(
        "ShortUrl",
        back_populates="record",
        order_by="ShortUrl.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class ShortUrl(Base):
    """
    A short identifier issued for a UrlRecord.

    short_url_id is indexed but not unique: deterministic re-shortening
    appends the same identifier again. Insertion order is the primary key.
    """
    __tablename__ = "short_urls"

    id = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(Integer, ForeignKey("url_records.id"), nullable=False, index=True)
    short_url_id = Column(String(7), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    record = relationship("UrlRecord", back_populates="short_urls")
