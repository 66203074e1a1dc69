"""Pytest configuration and fixtures."""

import time
from typing import AsyncGenerator, Callable, Dict, Optional, Tuple

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config, ShortenConfig
from shortlink.common.logging_config import setup_logging
from shortlink.service import ShortLinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store.redis_store import RedisStore
from web_app import create_shorten_app, create_unshorten_app

TEST_REDIS_URI = "redis://localhost:6379/0"
TEST_TTL_SECONDS = 24 * 60 * 60


class ManualClock:
    """Clock the tests move forward by hand."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedisClient:
    """In-memory async client covering the commands RedisStore issues.

    Keys expire against the injected clock, the way Redis applies EX.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.monotonic
        self.data: Dict[str, Tuple[str, Optional[float]]] = {}
        self.commands = []
        self.closed = False

    async def ping(self) -> bool:
        self.commands.append(("PING",))
        return True

    async def set(self, name: str, value: str, ex: Optional[int] = None) -> bool:
        self.commands.append(("SET", name, value, ex))
        expires_at = self.clock() + ex if ex else None
        self.data[name] = (value, expires_at)
        return True

    async def get(self, name: str) -> Optional[str]:
        self.commands.append(("GET", name))
        entry = self.data.get(name)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self.clock() >= expires_at:
            del self.data[name]
            return None
        return value

    async def aclose(self) -> None:
        self.closed = True

    def command_names(self):
        return [command[0] for command in self.commands]


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedisClient(clock=clock)


@pytest.fixture
async def store(fake_redis, logger) -> AsyncGenerator[RedisStore, None]:
    """Connected store backed by the in-memory client."""
    store = RedisStore(
        redis_url=TEST_REDIS_URI,
        ttl_seconds=TEST_TTL_SECONDS,
        logger=logger,
        client=fake_redis,
    )
    await store.connect()

    yield store

    await store.close()


@pytest.fixture
def service(store, logger) -> ShortLinkService:
    return ShortLinkService(
        store=store,
        short_code_generator=ShortCodeGenerator(),
        logger=logger,
    )


@pytest.fixture
def shorten_config():
    return ShortenConfig(redis_uri=TEST_REDIS_URI, app_port=8080, dev_flag="0")


@pytest.fixture
def unshorten_config():
    return Config(redis_uri=TEST_REDIS_URI, app_port=8081)


@pytest.fixture
def shorten_app(service, shorten_config, logger):
    return create_shorten_app(
        service_instance=service,
        config=shorten_config,
        logger=logger,
    )


@pytest.fixture
def unshorten_app(service, unshorten_config, logger):
    return create_unshorten_app(
        service_instance=service,
        config=unshorten_config,
        logger=logger,
    )


@pytest.fixture
async def shorten_client(shorten_app):
    """Client for the shorten service."""
    transport = ASGITransport(app=shorten_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
async def unshorten_client(unshorten_app):
    """Client for the unshorten service."""
    transport = ASGITransport(app=unshorten_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
