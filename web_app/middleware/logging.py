"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes one access line per request: URI, status and duration."""

    def __init__(self, app, logger: logging.Logger):
        """Initialize logging middleware.

        Args:
            app: ASGI app to wrap
            logger: Process logger configured at startup
        """
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()

        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            self._log(uri, 500, start_time)
            raise

        self._log(uri, response.status_code, start_time)
        return response

    def _log(self, uri: str, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"request URI={uri} status={status} duration={duration_ms:.2f}ms"
        )
