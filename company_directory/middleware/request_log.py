"""Request logging middleware — one access line per request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("company_directory.access")

# Health probes stay at DEBUG
_QUIET_PATHS = {"/health"}

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.DEBUG if request.url.path in _QUIET_PATHS else logging.INFO
        logger.log(
            level,
            "%s %s → %s (%sms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
