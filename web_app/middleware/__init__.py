"""Middleware for the short-link web apps."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
