"""Service jobs and job comments repositories."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.service_jobs import JobComment, ServiceJob
from ..entities.users import User
from .base import AsyncCrudRepository


class ServiceJobRepository(AsyncCrudRepository[ServiceJob]):
    """Repository for service jobs, newest first."""

    default_order = (ServiceJob.id.desc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ServiceJob)

    async def delete(self, entity_id: str | int) -> bool:
        """Delete a job together with its comments."""
        job = await self.get_by_id(entity_id)
        if job is None:
            return False
        comments = await self.session.exec(select(JobComment).where(JobComment.job_id == job.id))
        for comment in comments.all():
            await self.session.delete(comment)
        await self.session.delete(job)
        await self.session.commit()
        return True


class JobCommentRepository(AsyncCrudRepository[JobComment]):
    """Repository for comments on service jobs, oldest first."""

    default_order = (JobComment.created_at.asc(), JobComment.id.asc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, JobComment)

    async def list_for_job(self, job_id: int) -> List[Tuple[JobComment, Optional[User]]]:
        """Comments on ``job_id`` with their authors (None for deleted users)."""
        stmt = (
            select(JobComment, User)
            .join(User, JobComment.user_id == User.id, isouter=True)  # type: ignore[arg-type]
            .where(JobComment.job_id == job_id)
            .order_by(*self.default_order)
        )
        result = await self.session.exec(stmt)
        return [(comment, user) for comment, user in result]
