"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS
and request timing), registers the exception handlers and includes all API
routers. Run it with ``uvicorn tabdeel_pulse.server.main:app``.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tabdeel_pulse.core.database import init_db
from tabdeel_pulse.core.logging_config import get_logger, setup_logging
from tabdeel_pulse.core.monitoring import initialize_logfire

from .api.v1 import (
    account_heads,
    announcements,
    auth,
    dashboard,
    finance,
    health,
    messages,
    projects,
    roles,
    service_jobs,
    tasks,
    threads,
    users,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

setup_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    enable_file=settings.enable_file_logging,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database on startup; log shutdown."""
    logger.info(f"Starting up {constant.PROJECT_NAME} server...")
    try:
        await init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Tabdeel Pulse Backend API

    Administration backend for the Tabdeel Pulse dashboard: users and roles,
    projects, finance (payment instructions, collections, deposits, account
    heads), service jobs, messaging, tasks and announcements.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=constant.API_PREFIX, tags=["auth"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users", tags=["users"])
app.include_router(roles.router, prefix=f"{constant.API_PREFIX}/roles", tags=["roles"])
app.include_router(projects.router, prefix=f"{constant.API_PREFIX}/projects", tags=["projects"])
app.include_router(account_heads.router, prefix=f"{constant.API_PREFIX}/account-heads", tags=["account-heads"])
app.include_router(finance.router, prefix=f"{constant.API_PREFIX}/finance", tags=["finance"])
app.include_router(service_jobs.router, prefix=f"{constant.API_PREFIX}/service-jobs", tags=["service-jobs"])
app.include_router(service_jobs.comments_router, prefix=f"{constant.API_PREFIX}/jobs", tags=["service-jobs"])
app.include_router(threads.router, prefix=f"{constant.API_PREFIX}/threads", tags=["messaging"])
app.include_router(messages.router, prefix=f"{constant.API_PREFIX}/messages", tags=["messaging"])
app.include_router(tasks.router, prefix=f"{constant.API_PREFIX}/tasks", tags=["tasks"])
app.include_router(announcements.router, prefix=f"{constant.API_PREFIX}/announcements", tags=["announcements"])
app.include_router(dashboard.router, prefix=constant.API_PREFIX, tags=["dashboard"])


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "tabdeel_pulse.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
