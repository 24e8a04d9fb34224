"""
Database models for URL shortener.

Note: Access logs are stored in a separate analytics database
(see shorturl_app.storage), not in SQLAlchemy models. This separates
transactional data from analytical data.
"""

from .url import UrlRecord, ShortUrl

__all__ = ["UrlRecord", "ShortUrl"]
