"""Configuration management for the short-link services."""

from typing import Optional, Type, TypeVar
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Configuration shared by both services."""

    # Store settings
    redis_uri: str = Field(
        ...,
        description="Redis connection URL (e.g. redis://localhost:6379/0)"
    )

    link_ttl_seconds: int = Field(
        default=24 * 60 * 60,
        gt=0,
        description="Retention for each short link, enforced by the store TTL"
    )

    # Server settings
    app_host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    app_port: int = Field(
        ...,
        gt=0,
        lt=65536,
        description="Port to listen on"
    )

    shutdown_grace_seconds: float = Field(
        default=10.0,
        gt=0,
        description="How long in-flight requests may run after an interrupt"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def safe_dump(self) -> dict:
        """Configuration for logging, with the store URI credentials hidden."""
        data = self.model_dump()
        data["redis_uri"] = _mask_credentials(self.redis_uri)
        return data


class ShortenConfig(Config):
    """Configuration for the shorten service."""

    dev_flag: str = Field(
        default="0",
        description="Set to '1' to issue http:// short links instead of https://"
    )

    @property
    def dev_mode(self) -> bool:
        return self.dev_flag == "1"


ConfigT = TypeVar("ConfigT", bound=Config)


def load_config(config_cls: Type[ConfigT] = Config) -> ConfigT:
    """Load configuration from environment.

    Raises:
        pydantic.ValidationError: If REDIS_URI or APP_PORT is missing or invalid
    """
    return config_cls()


def _mask_credentials(uri: str) -> str:
    scheme, sep, rest = uri.partition("://")
    if not sep or "@" not in rest:
        return uri
    return f"{scheme}://***@{rest.rsplit('@', 1)[1]}"
