"""Abstract base class for short-link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class ShortLinkStoreBase(ABC):
    """Abstract base class for short-link store operations.

    Implementations raise StoreError for communication failures and
    StoreConnectionError when the store cannot be reached at startup.
    """

    def __init__(self, store_uri: str, ttl_seconds: int):
        """Initialize store settings.

        Args:
            store_uri: Store connection string
            ttl_seconds: Retention for every mapping written
        """
        self.store_uri = store_uri
        self.ttl_seconds = ttl_seconds

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection and verify the store answers.

        Raises:
            StoreConnectionError: If the URI is invalid or the store is unreachable
        """
        pass

    @abstractmethod
    async def set_link(self, short_code: str, original_url: str) -> None:
        """Store a short code mapping with the configured TTL.

        Args:
            short_code: The short code to use as key
            original_url: The original long URL
        """
        pass

    @abstractmethod
    async def get_link(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The original URL if found, None if missing or expired
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
