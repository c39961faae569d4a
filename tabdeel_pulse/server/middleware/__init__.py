"""Request middleware for the Tabdeel Pulse server."""

from .logfire_middleware import SLOW_REQUEST_MS, LogfireMiddleware

__all__ = ["LogfireMiddleware", "SLOW_REQUEST_MS"]
