"""Exceptions raised by the short-link service and store layers."""


class ShortLinkError(Exception):
    """Base class for short-link errors."""


class EmptyURLError(ShortLinkError, ValueError):
    """Raised when a URL to shorten is empty."""

    def __init__(self, message: str = "url cannot be empty"):
        super().__init__(message)


class EmptyCodeError(ShortLinkError, ValueError):
    """Raised when a short code to resolve is empty."""

    def __init__(self, message: str = "short url cannot be empty"):
        super().__init__(message)


class LinkNotFoundError(ShortLinkError, LookupError):
    """Raised when a short code is unknown or has expired."""

    def __init__(self, code: str):
        super().__init__(f"Short code '{code}' not found")
        self.code = code


class StoreError(ShortLinkError):
    """Raised when the key-value store cannot complete an operation."""


class StoreConnectionError(StoreError):
    """Raised when the store URI is invalid or the store is unreachable."""
