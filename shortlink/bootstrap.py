"""Process startup shared by the shorten and unshorten entry points."""

import logging
import sys
from typing import Tuple, Type

from pydantic import ValidationError

from config import Config, ConfigT, load_config
from .common.logging_config import setup_logging
from .service import ShortLinkService
from .shortcode import ShortCodeGenerator
from .store.redis_store import RedisStore


def load_or_exit(config_cls: Type[ConfigT]) -> Tuple[ConfigT, logging.Logger]:
    """Load configuration and set up logging, exiting on invalid config.

    Returns:
        Tuple of (config, logger)
    """
    try:
        config = load_config(config_cls)
    except ValidationError as e:
        logger = setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    return config, logger


def build_service(config: Config, logger: logging.Logger) -> ShortLinkService:
    """Build the store client and service; the store connects in app lifespan."""
    store = RedisStore(
        redis_url=config.redis_uri,
        ttl_seconds=config.link_ttl_seconds,
        logger=logger,
    )
    return ShortLinkService(
        store=store,
        short_code_generator=ShortCodeGenerator(),
        logger=logger,
    )
