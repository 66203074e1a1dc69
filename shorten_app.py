#!/usr/bin/env python3
"""
Entry point for the shorten service.

Usage:
    python shorten_app.py

Environment variables:
    REDIS_URI - Redis connection URL (required)
    APP_PORT - Port to listen on (required)
    DEV_FLAG - Set to '1' to issue http:// short links
    LINK_TTL_SECONDS - Short link retention (default 86400)
    SHUTDOWN_GRACE_SECONDS - Drain period on shutdown (default 10)
    LOG_LEVEL - Logging level
"""

import sys

from config import ShortenConfig
from shortlink.bootstrap import build_service, load_or_exit
from web_app import create_shorten_app, run_service


def main():
    """Main entry point."""
    config, logger = load_or_exit(ShortenConfig)

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    service = build_service(config, logger)
    app = create_shorten_app(
        service_instance=service,
        config=config,
        logger=logger,
    )

    sys.exit(run_service(app, service, config, logger))


if __name__ == "__main__":
    main()
