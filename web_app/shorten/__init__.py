"""Shorten service routes."""

from .routes import router as shorten_router

__all__ = ["shorten_router"]
