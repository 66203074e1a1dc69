"""Data models for short links."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShortLink:
    """A short code mapped to its original URL.

    Creation time is not stored; expiry is left to the store TTL.
    """

    code: str
    target: str
    ttl_seconds: int

