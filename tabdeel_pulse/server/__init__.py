"""
Tabdeel Pulse Server Package.

This package contains the web server for the Tabdeel Pulse dashboard.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and application constants.
    exception_handlers: Application-wide exception handlers.
    middleware: Request timing and tracing middleware.
    services: Dependencies and the logic shared by several routers.
"""
