"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.server.core.config import settings

from .seed import seed_defaults
from .utils import create_all, create_engine, create_sessionmaker, drop_all

logger = get_logger(__name__)

engine = create_engine(settings.database.url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db(*, auto_create: bool | None = None, reset: bool | None = None) -> None:
    """
    Prepare the database for local development.

    In production the schema is owned by Alembic and this is a no-op. When
    ``auto_create`` is enabled the tables are created and the default roles
    and users are seeded; ``reset`` drops everything first.
    """
    config = settings.database
    auto_create = config.auto_create if auto_create is None else auto_create
    reset = config.reset_on_start if reset is None else reset

    if reset:
        logger.warning("Dropping all tables before startup (TABDEEL_DB_RESET_ON_START is set)")
        await drop_all(engine)
    if not (auto_create or reset):
        logger.debug("Skipping table creation; schema is managed by Alembic")
        return

    await create_all(engine)
    async with async_session_maker() as session:
        await seed_defaults(session)
    logger.info("Database tables created and default data seeded")
