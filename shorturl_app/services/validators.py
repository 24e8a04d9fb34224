"""
Input predicates for long URLs and short identifiers.

Both are plain booleans; callers decide how to reject.
"""

import re
from urllib.parse import urlsplit

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

MAX_SHORT_URL_LENGTH = 7

_SHORT_URL_RE = re.compile(r"[0-9A-Za-z]{1,%d}" % MAX_SHORT_URL_LENGTH)
_http_url_adapter = TypeAdapter(HttpUrl)


def is_valid_http_url(value) -> bool:
    """
    True iff ``value`` is an absolute http(s) URL with a non-empty host.

    pydantic's HttpUrl repairs sloppy input such as ``http:/example.com``,
    so the raw string is checked structurally first.
    """
    if not isinstance(value, str) or not value:
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        return False

    if parts.scheme not in ("http", "https"):
        return False
    if not value.lower().startswith(parts.scheme + "://"):
        return False
    if not parts.netloc or not parts.hostname:
        return False

    try:
        _http_url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def is_valid_short_url(value) -> bool:
    """True iff ``value`` is 1-7 ASCII alphanumerics."""
    return isinstance(value, str) and _SHORT_URL_RE.fullmatch(value) is not None
