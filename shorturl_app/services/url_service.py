import logging
import uuid
from typing import Optional, Tuple

from shorturl_app.cache import CacheStrategy, cache_get, cache_set
from shorturl_app.errors import NotFoundError, StoreError, ValidationError
from shorturl_app.models.url import ShortUrl, UrlRecord
from shorturl_app.services.short_code_strategies import ShortCodeStrategy
from shorturl_app.services.validators import is_valid_http_url, is_valid_short_url
from shorturl_app.storage.url_records import UrlRecordStore

logger = logging.getLogger(__name__)

MAX_SHORT_CODE_ATTEMPTS = 5


def short_url_cache_key(short_url_id: str) -> str:
    return f"shortUrl:{short_url_id}"


class URLService:
    """
    Resolution pipeline: shortening and cache-aside lookup.

    Every collaborator is injected:
    - url_store: durable long URL <-> short identifier records
    - cache: optional accelerator, failures degrade to misses
    - short_code_strategy: deterministic identifier derivation

    Redirect lookup states:
    CACHE_LOOKUP -> hit -> REDIRECT
                 -> miss -> STORE_LOOKUP -> found -> POPULATE_CACHE -> REDIRECT
                                         -> not found -> FAIL
    """

    def __init__(
        self,
        url_store: UrlRecordStore,
        short_code_strategy: ShortCodeStrategy,
        base_url: str,
        cache_ttl: int,
        cache: Optional[CacheStrategy] = None,
    ):
        if cache_ttl <= 0:
            raise ValueError(f"cache_ttl must be a positive number of seconds, got {cache_ttl}")
        self.url_store = url_store
        self.short_code_strategy = short_code_strategy
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.cache = cache

    def build_short_url(self, short_url_id: str) -> str:
        return f"{self.base_url}/{short_url_id}"

    async def create_short_url(self, long_url: str) -> str:
        """
        Shorten ``long_url`` and return the fully qualified short URL.

        Known long URLs get the identifier re-derived from their stored
        long_url_id, which is deterministic: shortening the same URL twice
        returns the same identifier, appended to the same record. New long
        URLs never reuse an identifier that already resolves elsewhere.

        Raises:
            ValidationError: long_url is not an absolute http(s) URL
            StoreError: the record could not be read or persisted, or no
                free identifier was found
        """
        if not is_valid_http_url(long_url):
            raise ValidationError("Invalid URL: expected an absolute http or https URL")

        record = await self.url_store.find_by_long_url(long_url)

        if record is None:
            long_url_id, short_url_id = await self._mint_free_short_url_id(long_url)
            record = UrlRecord(
                long_url_id=long_url_id,
                long_url=long_url,
                short_urls=[ShortUrl(short_url_id=short_url_id)],
            )
            logger.info("New URL record %s -> %s", short_url_id, long_url)
        else:
            short_url_id = self.short_code_strategy.generate(record.long_url_id)
            record.short_urls.append(ShortUrl(short_url_id=short_url_id))
            logger.info("Re-shortened %s -> %s", short_url_id, long_url)

        await self.url_store.save(record)

        await cache_set(self.cache, short_url_cache_key(short_url_id), long_url, self.cache_ttl)

        return self.build_short_url(short_url_id)

    async def _mint_free_short_url_id(self, long_url: str) -> Tuple[str, str]:
        """
        Mint a long_url_id whose derived identifier no record owns yet.

        The digest strategy maps tokens into a 40-bit space, so a fresh token
        can land on an identifier another long URL already redirects to.
        Such tokens are discarded and a new one is minted.
        """
        for attempt in range(1, MAX_SHORT_CODE_ATTEMPTS + 1):
            long_url_id = str(uuid.uuid4())
            short_url_id = self.short_code_strategy.generate(long_url_id)
            owner = await self.url_store.find_by_short_url_id(short_url_id)
            if owner is None:
                return long_url_id, short_url_id
            logger.warning(
                "Identifier %s for %s already taken by %s (attempt %d/%d)",
                short_url_id, long_url, owner.long_url, attempt, MAX_SHORT_CODE_ATTEMPTS,
            )
        raise StoreError(
            f"No free short identifier for {long_url} after {MAX_SHORT_CODE_ATTEMPTS} attempts"
        )

    async def get_long_url_for_redirect(self, short_url_id: str) -> str:
        """
        Resolve a short identifier using the Cache-Aside pattern.

        A cache hit returns immediately and does not refresh the TTL. On a
        miss the record store is queried and, if found, the mapping is
        written back with the configured TTL. Unknown identifiers are never
        cached.

        Raises:
            ValidationError: malformed identifier
            NotFoundError: no record owns the identifier
            StoreError: the record store failed
        """
        if not is_valid_short_url(short_url_id):
            raise ValidationError("Invalid short URL: expected 1-7 alphanumeric characters")

        cache_key = short_url_cache_key(short_url_id)

        cached_url = await cache_get(self.cache, cache_key)
        if cached_url:
            return cached_url

        record = await self.url_store.find_by_short_url_id(short_url_id)
        if record is None:
            raise NotFoundError()

        await cache_set(self.cache, cache_key, record.long_url, self.cache_ttl)

        return record.long_url
