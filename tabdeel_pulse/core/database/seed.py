"""
Default data seeding.

Seeds the system roles and the three demo accounts. Seeding is idempotent:
rows that already exist (by role id or user email) are left untouched, so it
is safe to run on every startup.
"""

from __future__ import annotations

from typing import Dict, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.permissions import ADMINISTRATOR, DEFAULT_ROLES, MANAGER, TECHNICIAN
from tabdeel_pulse.core.security import hash_password

from .entities import Role, User

logger = get_logger(__name__)

DEFAULT_PASSWORD = "password"

DEFAULT_USERS: List[Dict[str, str]] = [
    {
        "name": "Admin User",
        "email": "admin@tabdeel.com",
        "role_id": ADMINISTRATOR,
        "avatar_url": "https://picsum.photos/seed/admin/100/100",
    },
    {
        "name": "Manager Mike",
        "email": "manager@tabdeel.com",
        "role_id": MANAGER,
        "avatar_url": "https://picsum.photos/seed/manager/100/100",
    },
    {
        "name": "Technician Tom",
        "email": "tech@tabdeel.com",
        "role_id": TECHNICIAN,
        "avatar_url": "https://picsum.photos/seed/tech/100/100",
    },
]

SEEDED_EMAILS = frozenset(user["email"] for user in DEFAULT_USERS)


async def seed_defaults(session: AsyncSession) -> None:
    """Insert missing default roles and users, then commit."""
    existing_roles = set((await session.exec(select(Role.id))).all())
    for role in DEFAULT_ROLES:
        if role["id"] not in existing_roles:
            session.add(Role.model_validate(role))
            logger.info(f"Seeding role {role['id']}")
    # Users reference roles; flush so the foreign keys resolve.
    await session.flush()

    existing_emails = set((await session.exec(select(User.email))).all())
    for user in DEFAULT_USERS:
        if user["email"] not in existing_emails:
            session.add(User(password_hash=hash_password(DEFAULT_PASSWORD), **user))
            logger.info(f"Seeding user {user['email']}")

    await session.commit()
