"""Projects repository."""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.projects import Project
from .base import AsyncCrudRepository


class ProjectRepository(AsyncCrudRepository[Project]):
    """Repository for project data access operations, listed by name."""

    default_order = (Project.name.asc(),)  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Project)
