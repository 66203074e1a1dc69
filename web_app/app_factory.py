"""FastAPI application factories for the shorten and unshorten services."""

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI, APIRouter

from shortlink.exceptions import StoreConnectionError
from .health import router as health_router
from .middleware.logging import RequestLoggingMiddleware
from .shorten import shorten_router
from .unshorten import unshorten_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store before serving; close it once requests have drained."""
    service = app.state.service
    logger = app.state.logger

    try:
        await service.store.connect()
    except StoreConnectionError as e:
        logger.critical(str(e))
        raise

    logger.info(f"{app.title} ready")

    yield

    await service.close()
    logger.info(f"{app.title} stopped")


def _create_app(
    title: str,
    routers: Iterable[APIRouter],
    service_instance,
    config,
    logger: logging.Logger,
) -> FastAPI:
    app = FastAPI(
        title=title,
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    app.add_middleware(RequestLoggingMiddleware, logger=logger)

    for router in routers:
        app.include_router(router)
    app.include_router(health_router, tags=["Health"])

    return app


def create_shorten_app(service_instance, config, logger: logging.Logger) -> FastAPI:
    """Create the shorten service app.

    Args:
        service_instance: ShortLinkService bound to a store
        config: ShortenConfig instance
        logger: Process logger

    Returns:
        Configured FastAPI app
    """
    return _create_app(
        "URL Shortener",
        [shorten_router],
        service_instance,
        config,
        logger,
    )


def create_unshorten_app(service_instance, config, logger: logging.Logger) -> FastAPI:
    """Create the unshorten service app.

    Args:
        service_instance: ShortLinkService bound to a store
        config: Config instance
        logger: Process logger

    Returns:
        Configured FastAPI app
    """
    return _create_app(
        "URL Unshortener",
        [unshorten_router],
        service_instance,
        config,
        logger,
    )
