"""Key-value store layer for short links."""

from .base import ShortLinkStoreBase
from .redis_store import RedisStore
from .models import ShortLink

__all__ = ["ShortLinkStoreBase", "RedisStore", "ShortLink"]
