"""
Short identifier generation strategies for URL shortener.
Uses Strategy Pattern to allow different derivation algorithms.

Every strategy is deterministic: the same long_url_id always yields the same
short identifier, so re-shortening a known long URL is idempotent.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Union

BASE62_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def encode_base62(unique_token: Union[str, bytes]) -> str:
    """
    Encode an opaque token as a Base62 string.

    The token's bytes (UTF-8 for str) are read as one big-endian unsigned
    integer, which is then written in base 62 using ``0-9A-Za-z``. There is
    no padding and no truncation. Empty input gives an empty string.

    Examples:
        encode_base62("") -> ""
        encode_base62(b"\\x3d") -> "z"
        encode_base62(b"\\x3e") -> "10"
    """
    data = unique_token.encode("utf-8") if isinstance(unique_token, str) else bytes(unique_token)
    if not data:
        return ""

    number = int.from_bytes(data, "big")
    if number == 0:
        return BASE62_CHARS[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, 62)
        digits.append(BASE62_CHARS[remainder])
    return "".join(reversed(digits))


class ShortCodeStrategy(ABC):
    """Abstract base class for short identifier strategies"""

    @abstractmethod
    def generate(self, long_url_id: str) -> str:
        """
        Derive a short identifier from a record's long_url_id.

        Args:
            long_url_id: Opaque token stored on the URL record (a UUID4 string)

        Returns:
            Short identifier drawn from [0-9A-Za-z]
        """
        pass


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Digest + Base62 strategy (default).

    A 36-character UUID string is 288 bits and would encode to ~49 Base62
    characters, so the token is first folded into a 5-byte BLAKE2b digest.
    2**40 < 62**7, hence the output never exceeds 7 characters.

    Pros: fixed upper bound on length, no DB queries, deterministic
    Cons: 40-bit space, collisions become likely around a million long URLs
    """

    DIGEST_SIZE = 5

    def generate(self, long_url_id: str) -> str:
        digest = hashlib.blake2b(
            long_url_id.encode("utf-8"), digest_size=self.DIGEST_SIZE
        ).digest()
        return encode_base62(digest)


class DirectShortCodeStrategy(ShortCodeStrategy):
    """
    Encodes the token bytes directly, without hashing.

    Only short tokens fit: anything above 5 bytes may overflow the length
    bound, in which case we refuse instead of truncating (truncation would
    silently create collisions).
    """

    def __init__(self, max_length: int = 7):
        self.max_length = max_length

    def generate(self, long_url_id: str) -> str:
        encoded = encode_base62(long_url_id)
        if len(encoded) > self.max_length:
            raise ValueError(
                f"Generated identifier '{encoded}' exceeds max length {self.max_length}. "
                f"Token {long_url_id!r} is too long for direct encoding."
            )
        return encoded
