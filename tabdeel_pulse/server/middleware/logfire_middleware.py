"""
Request timing middleware.

Every request is timed and reported through ``log_api_request`` (a Logfire
span when monitoring is configured, a debug log line otherwise). The elapsed
time is echoed back in ``X-Process-Time`` and slow requests are logged as
warnings.
"""

import time
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.monitoring import log_api_request

logger = get_logger(__name__)

SLOW_REQUEST_MS = 1000


class LogfireMiddleware(BaseHTTPMiddleware):
    """Time API requests and report them to Logfire."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start = time.perf_counter()
        method, path = request.method, request.url.path

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error(f"API request failed: {method} {path} after {duration_ms:.2f}ms")
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        if duration_ms > SLOW_REQUEST_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={"method": method, "path": path, "duration_ms": duration_ms, "status_code": response.status_code},
            )
        return response
