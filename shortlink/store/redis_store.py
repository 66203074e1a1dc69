"""Redis store for short-link mappings."""

import logging
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .base import ShortLinkStoreBase
from ..exceptions import StoreConnectionError, StoreError

DEFAULT_TTL_SECONDS = 24 * 60 * 60


class RedisStore(ShortLinkStoreBase):
    """Redis-backed store. Keys are short codes, values are original URLs."""

    def __init__(
        self,
        redis_url: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        logger: Optional[logging.Logger] = None,
        client: Optional[Any] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: TTL applied to every mapping
            logger: Optional logger instance
            client: Optional pre-built client; skips URL parsing in connect()
        """
        super().__init__(store_uri=redis_url, ttl_seconds=ttl_seconds)
        self.redis_url = redis_url
        self.logger = logger or logging.getLogger(__name__)
        self.client = client

    async def connect(self) -> None:
        """Connect to Redis and ping it.

        Raises:
            StoreConnectionError: If the URI is invalid or Redis does not answer
        """
        if self.client is None:
            try:
                self.client = redis.from_url(
                    self.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
            except ValueError as e:
                raise StoreConnectionError(f"invalid Redis URI: {e}") from e

        try:
            await self.client.ping()
        except (RedisError, OSError) as e:
            raise StoreConnectionError(f"failed to connect to Redis: {e}") from e

        self.logger.info(f"Connected to Redis (ttl={self.ttl_seconds}s)")

    async def set_link(self, short_code: str, original_url: str) -> None:
        """Write a mapping with the configured TTL.

        Args:
            short_code: Key
            original_url: Value

        Raises:
            StoreError: If the write fails
        """
        client = self._require_client()
        try:
            await client.set(short_code, original_url, ex=self.ttl_seconds)
        except RedisError as e:
            raise StoreError(f"set {short_code}: {e}") from e

    async def get_link(self, short_code: str) -> Optional[str]:
        """Read a mapping.

        Args:
            short_code: Key

        Returns:
            Stored URL, or None when the key is missing or expired

        Raises:
            StoreError: If the read fails
        """
        client = self._require_client()
        try:
            return await client.get(short_code)
        except RedisError as e:
            raise StoreError(f"get {short_code}: {e}") from e

    async def health_check(self) -> bool:
        if self.client is None:
            return False
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError) as e:
            self.logger.warning(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection. Safe to call more than once."""
        if self.client is not None:
            client, self.client = self.client, None
            await client.aclose()
            self.logger.info("Redis connection closed")

    def _require_client(self):
        if self.client is None:
            raise StoreError("store is not connected")
        return self.client
