"""Common utilities for the short-link services."""

from .url_builder import build_short_url, short_link_scheme
from .logging_config import setup_logging

__all__ = [
    "build_short_url",
    "short_link_scheme",
    "setup_logging",
]
