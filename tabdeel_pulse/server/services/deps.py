"""
API Dependencies.

Provides the database session dependency and acting-user resolution for
endpoints that must be authorised. The acting user is identified by the
``X-User-Id`` header the dashboard sends after login.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Callable, FrozenSet, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from tabdeel_pulse.core.database import get_session
from tabdeel_pulse.core.database.entities import Role, User
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.permissions import Permission, financial_limit, has_permission

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


@dataclass(frozen=True)
class ActingUser:
    """The user performing a request, with their role's permissions resolved."""

    user: User
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def id(self) -> int:
        return self.user.id  # type: ignore[return-value]

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def financial_limit(self) -> int:
        return financial_limit(self.user.role_id)

    def can(self, permission: Permission | str) -> bool:
        return has_permission(self.permissions, permission)


async def get_acting_user(
    session: SessionDep,
    x_user_id: Annotated[Optional[int], Header(description="Id of the logged-in user")] = None,
) -> ActingUser:
    """Resolve the ``X-User-Id`` header to an active user.

    Raises:
        HTTPException: 401 when the header is missing or names no active user
    """
    if x_user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-User-Id header is required.")
    user = await session.get(User, x_user_id)
    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown or inactive user.")
    role = await session.get(Role, user.role_id)
    return ActingUser(user=user, permissions=frozenset(role.permissions if role else ()))


ActingUserDep = Annotated[ActingUser, Depends(get_acting_user)]


def require_permission(permission: Permission) -> Callable[..., object]:
    """Build a dependency that returns the acting user if they hold ``permission``."""

    async def _dependency(actor: ActingUserDep) -> ActingUser:
        if not actor.can(permission):
            logger.info(f"User {actor.id} denied: missing {permission.value}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission '{permission.value}' is required.",
            )
        return actor

    return _dependency


def require_fields(**values: object) -> None:
    """Raise 400 listing every argument whose value is missing or blank.

    Keyword names are the wire (camelCase) field names, so the message matches
    what the client sent.
    """
    missing = [name for name, value in values.items() if value is None or (isinstance(value, str) and not value.strip())]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )
