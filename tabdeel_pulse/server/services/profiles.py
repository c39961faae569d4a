"""Helpers that turn user rows into the shapes the dashboard displays."""

from __future__ import annotations

from typing import Dict, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from tabdeel_pulse.core.database.entities import Role, User
from tabdeel_pulse.core.models.io import Participant, UserProfile, UserRead
from tabdeel_pulse.core.permissions import financial_limit

UNKNOWN_USER_NAME = "Unknown User"


async def build_profile(session: AsyncSession, user: User) -> UserProfile:
    """Attach role name, permissions and approval limit to ``user``."""
    role: Optional[Role] = await session.get(Role, user.role_id)
    return UserProfile(
        **UserRead.model_validate(user).model_dump(),
        role=role.name if role else user.role_id,
        permissions=list(role.permissions) if role else [],
        financial_limit=financial_limit(user.role_id),
    )


def participant(user_id: Optional[int], users: Dict[int, User]) -> Participant:
    """Display reference for ``user_id``; ids with no user render as "Unknown User"."""
    user = users.get(user_id) if user_id is not None else None
    if user is None:
        return Participant(id=user_id or 0, name=UNKNOWN_USER_NAME, avatar_url="")
    return Participant(id=user.id, name=user.name, avatar_url=user.avatar_url)
