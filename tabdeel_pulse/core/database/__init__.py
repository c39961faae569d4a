"""
Database layer for Tabdeel Pulse.

Structure:
- entities/: SQLModel table definitions, one module per business domain
- repositories/: Async data access layer over those entities
- seed.py: Default roles and demo users
- session.py: Global engine and session factory management
- utils.py: Engine/session factory helpers and table management
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
]
