"""
Users repository.

Lookups by email for login, name maps for rendering senders and assignees,
and a delete that detaches the user from everything that references them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete as sql_delete
from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.service_jobs import JobComment
from ..entities.tasks import Task
from ..entities.threads import Message, ThreadParticipant
from ..entities.users import User
from .base import AsyncCrudRepository


class UserRepository(AsyncCrudRepository[User]):
    """Repository for user data access operations."""

    default_order = (User.name.asc(),)  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case and surrounding whitespace."""
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def get_many(self, user_ids: Iterable[int]) -> Dict[int, User]:
        """Load several users at once, keyed by id. Missing ids are simply absent."""
        ids = set(user_ids)
        if not ids:
            return {}
        result = await self.session.exec(select(User).where(User.id.in_(ids)))  # type: ignore[union-attr]
        return {user.id: user for user in result if user.id is not None}

    async def joined_since(self, since: datetime, exclude_emails: Iterable[str] = ()) -> List[User]:
        """Users created at or after ``since``, newest first."""
        stmt = select(User).where(User.created_at >= since)
        excluded = list(exclude_emails)
        if excluded:
            stmt = stmt.where(User.email.not_in(excluded))  # type: ignore[attr-defined]
        stmt = stmt.order_by(User.created_at.desc())  # type: ignore[attr-defined]
        result = await self.session.exec(stmt)
        return list(result)

    async def delete(self, entity_id: str | int) -> bool:
        """Delete a user, clearing references to them first.

        Messages, comments and task assignments keep their rows with a null
        user; thread memberships are removed.
        """
        user = await self.get_by_id(entity_id)
        if user is None:
            return False
        await self.session.exec(  # type: ignore[call-overload]
            update(Message).where(Message.user_id == user.id).values(user_id=None)
        )
        await self.session.exec(  # type: ignore[call-overload]
            update(JobComment).where(JobComment.user_id == user.id).values(user_id=None)
        )
        await self.session.exec(  # type: ignore[call-overload]
            update(Task).where(Task.assigned_to_user_id == user.id).values(assigned_to_user_id=None)
        )
        await self.session.exec(  # type: ignore[call-overload]
            sql_delete(ThreadParticipant).where(ThreadParticipant.user_id == user.id)
        )
        await self.session.delete(user)
        await self.session.commit()
        return True
