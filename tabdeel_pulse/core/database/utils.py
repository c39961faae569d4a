"""
Engine, session-factory and schema helpers.

Functions:
- normalize_url: Force the asyncpg driver on any Postgres URL
- create_engine: Async engine for a (normalised) URL
- create_sessionmaker: Factory for SQLModel ``AsyncSession`` objects
- create_all / drop_all: Schema from ORM metadata, for tests and local runs
"""

from __future__ import annotations

import re

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .base import Base

_POSTGRES_SCHEME = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite ``postgres://``, ``postgresql://`` and other driver variants to ``postgresql+asyncpg://``."""
    return _POSTGRES_SCHEME.sub("postgresql+asyncpg://", db_url, count=1)


def create_engine(db_url: str) -> AsyncEngine:
    """Async engine with connection liveness checks; SQLite URLs pass through untouched."""
    return create_async_engine(normalize_url(db_url), pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine``.

    Objects stay loaded after commit so handlers can serialise them without
    another round trip.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create every table on ``engine``. Deployed databases are migrated with Alembic instead."""
    from . import entities  # noqa: F401  registers every table on the metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop every table known to the ORM metadata."""
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
