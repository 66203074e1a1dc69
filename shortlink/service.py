"""Business logic service for the short-link services."""

import logging
from typing import Optional, Dict

from .shortcode import ShortCodeGenerator
from .store.base import ShortLinkStoreBase
from .store.models import ShortLink
from .exceptions import EmptyURLError, EmptyCodeError, LinkNotFoundError


class ShortLinkService:
    """Service layer shared by the shorten and unshorten apps.

    Each call performs at most one store operation. Store failures are
    raised as StoreError and never retried.
    """

    def __init__(
        self,
        store: ShortLinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize short-link service.

        Args:
            store: Connected store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)

    async def create_short_link(self, original_url: str) -> ShortLink:
        """Create a new short link.

        The URL is stored verbatim; only emptiness is checked.

        Args:
            original_url: The original long URL

        Returns:
            The created ShortLink

        Raises:
            EmptyURLError: If original_url is empty
            StoreError: If the store write fails
        """
        if not original_url:
            raise EmptyURLError()

        short_code = self.generator.generate()
        await self.store.set_link(short_code, original_url)

        self.logger.debug(f"Created short link: {short_code} -> {original_url}")

        return ShortLink(
            code=short_code,
            target=original_url,
            ttl_seconds=self.store.ttl_seconds,
        )

    async def resolve(self, short_code: str) -> str:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL

        Raises:
            EmptyCodeError: If short_code is empty
            LinkNotFoundError: If the code is unknown or expired
            StoreError: If the store read fails
        """
        if not short_code:
            raise EmptyCodeError()

        original_url = await self.store.get_link(short_code)
        if original_url is None:
            self.logger.debug(f"Short code not found: {short_code}")
            raise LinkNotFoundError(short_code)

        return original_url

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
