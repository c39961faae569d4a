"""Tasks repository."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.tasks import Task
from ..entities.users import User
from .base import AsyncCrudRepository


class TaskRepository(AsyncCrudRepository[Task]):
    """Repository for tasks.

    Tasks are ordered by deadline (tasks without one last), then newest first.
    """

    default_order = (
        Task.deadline.is_(None),  # type: ignore[union-attr]
        Task.deadline.asc(),  # type: ignore[union-attr]
        Task.id.desc(),  # type: ignore[union-attr]
    )

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_with_assignees(self) -> List[Tuple[Task, Optional[User]]]:
        stmt = (
            select(Task, User)
            .join(User, Task.assigned_to_user_id == User.id, isouter=True)  # type: ignore[arg-type]
            .order_by(*self.default_order)
        )
        result = await self.session.exec(stmt)
        return [(task, user) for task, user in result]

    async def toggle(self, task: Task) -> Task:
        task.is_completed = not task.is_completed
        return await self.update(task)
