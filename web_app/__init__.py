"""Web apps for the shorten and unshorten services."""

from .app_factory import create_shorten_app, create_unshorten_app
from .server import run_service

__all__ = ["create_shorten_app", "create_unshorten_app", "run_service"]
