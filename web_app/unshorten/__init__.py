"""Unshorten service routes."""

from .routes import router as unshorten_router

__all__ = ["unshorten_router"]
