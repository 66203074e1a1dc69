"""Core business logic for the short-link services."""

from .shortcode import ShortCodeGenerator
from .service import ShortLinkService

__all__ = ["ShortCodeGenerator", "ShortLinkService"]
