"""
Access logging for the shortener.

One line per request once the response is ready. Redirects out of
/api/shorturl/{short_url} also record where the short url pointed,
so the log alone shows which id sent a client where.
"""

import time
import logging
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Redirect targets are user-submitted and can be arbitrarily long
MAX_LOGGED_TARGET = 200


def describe_response(response: Response) -> str:
    """Status text for the access log, with the target for redirects"""
    description = str(response.status_code)
    location = response.headers.get("location")
    if 300 <= response.status_code < 400 and location:
        if len(location) > MAX_LOGGED_TARGET:
            location = location[:MAX_LOGGED_TARGET] + "..."
        description += f" -> {location}"
    return description


class LoggingMiddleware(BaseHTTPMiddleware):
    """Writes an access log line for every request"""

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shorturl_app.http")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"{client_ip} {request.method} {request.url.path} "
            f"{describe_response(response)} ({duration_ms:.1f}ms)"
        )
        return response
