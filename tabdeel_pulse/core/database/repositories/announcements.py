"""Announcements repository."""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.announcements import Announcement
from .base import AsyncCrudRepository


class AnnouncementRepository(AsyncCrudRepository[Announcement]):
    """Repository for announcements, newest first."""

    default_order = (Announcement.id.desc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Announcement)
