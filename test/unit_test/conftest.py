import os
from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.pool import StaticPool

# Use in-memory SQLite for testing; must be set before the app settings are imported
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["LOGFIRE_ENABLED"] = "false"
os.environ["GOOGLE_API_KEY"] = ""

from tabdeel_pulse.core.database import create_all, create_sessionmaker  # noqa: E402
from tabdeel_pulse.core.database.seed import seed_defaults  # noqa: E402

# Seeded accounts get ids in insertion order
ADMIN_ID = 1
MANAGER_ID = 2
TECHNICIAN_ID = 3

SUMMARY_TEXT = "- Decided to ship on Friday\n- Tom prepares the release notes"


def _as_user(user_id: int) -> Dict[str, str]:
    return {"X-User-Id": str(user_id)}


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return _as_user(ADMIN_ID)


@pytest.fixture
def manager_headers() -> Dict[str, str]:
    return _as_user(MANAGER_ID)


@pytest.fixture
def technician_headers() -> Dict[str, str]:
    return _as_user(TECHNICIAN_ID)


@pytest.fixture
def summary_text() -> str:
    return SUMMARY_TEXT


@pytest_asyncio.fixture
async def test_engine():
    """A fresh in-memory database with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """A session on the test database with the default roles and users seeded."""
    async with create_sessionmaker(test_engine)() as session:
        await seed_defaults(session)
        yield session


@pytest.fixture
def summarizer():
    """A thread summarizer backed by Pydantic AI's offline TestModel."""
    from pydantic_ai.models.test import TestModel

    from tabdeel_pulse.server.services.summarizer import ThreadSummarizer

    return ThreadSummarizer(TestModel(custom_output_text=SUMMARY_TEXT), model_name="test")


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, summarizer) -> AsyncGenerator[AsyncClient, None]:
    """An async HTTP client bound to the app, with the session and summarizer overridden."""
    from tabdeel_pulse.core.database import get_session
    from tabdeel_pulse.server.main import app
    from tabdeel_pulse.server.services.summarizer import get_summarizer

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_summarizer] = lambda: summarizer

    # ASGITransport does not run the lifespan, so init_db is never called
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
