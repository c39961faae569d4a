"""Unit tests for database URL handling and engine helpers."""

import pytest
from sqlalchemy import inspect

from tabdeel_pulse.core.database import create_all, create_engine, drop_all
from tabdeel_pulse.core.database.utils import normalize_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
        ("postgresql://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("postgresql+psycopg2://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("postgresql+asyncpg://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


async def test_create_and_drop_all():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    try:
        await create_all(engine)
        async with engine.connect() as conn:
            tables = set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
        assert {
            "roles",
            "users",
            "projects",
            "account_heads",
            "payment_instructions",
            "collections",
            "deposits",
            "service_jobs",
            "job_comments",
            "threads",
            "thread_participants",
            "messages",
            "tasks",
            "announcements",
        } <= tables

        await drop_all(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert tables == []
    finally:
        await engine.dispose()
