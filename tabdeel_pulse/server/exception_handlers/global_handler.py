"""
Global Exception Handler.

Catches unhandled exceptions, logs them with the request context under a
short error id and returns a generic 500 body carrying that id, so a
dashboard user can quote it when reporting the problem.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tabdeel_pulse.core.logging_config import get_logger

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unhandled exception and return a 500 response.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with ``detail``, ``error_id`` and ``error_type``
    """
    error_id = uuid.uuid4().hex[:12]
    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the exception handlers with ``app``."""
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered")
