#!/usr/bin/env python3
"""
Entry point for the unshorten service.

Usage:
    python unshorten_app.py

Environment variables:
    REDIS_URI - Redis connection URL (required)
    APP_PORT - Port to listen on (required)
    SHUTDOWN_GRACE_SECONDS - Drain period on shutdown (default 10)
    LOG_LEVEL - Logging level
"""

import sys

from config import Config
from shortlink.bootstrap import build_service, load_or_exit
from web_app import create_unshorten_app, run_service


def main():
    """Main entry point."""
    config, logger = load_or_exit(Config)

    logger.info("URL Unshortener Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    service = build_service(config, logger)
    app = create_unshorten_app(
        service_instance=service,
        config=config,
        logger=logger,
    )

    sys.exit(run_service(app, service, config, logger))


if __name__ == "__main__":
    main()
