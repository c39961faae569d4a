"""Announcement Endpoints."""

from fastapi import APIRouter, HTTPException, status

from tabdeel_pulse.core.database.entities import Announcement
from tabdeel_pulse.core.database.repositories import AnnouncementRepository
from tabdeel_pulse.core.formatting import time_ago
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.io import AnnouncementCreate, AnnouncementRead, PersonRef
from tabdeel_pulse.server.services.deps import SessionDep, require_fields

logger = get_logger(__name__)

router = APIRouter()


def _to_read(announcement: Announcement) -> AnnouncementRead:
    return AnnouncementRead(
        id=announcement.id,  # type: ignore[arg-type]
        title=announcement.title,
        content=announcement.content,
        author=PersonRef(name=announcement.author_name, avatar_url=announcement.author_avatar_url),
        timestamp=time_ago(announcement.created_at),
    )


@router.get(
    "",
    response_model=list[AnnouncementRead],
    summary="List Announcements",
    description="All announcements, newest first.",
)
async def list_announcements(session: SessionDep) -> list[AnnouncementRead]:
    return [_to_read(a) for a in await AnnouncementRepository(session).list()]


@router.post(
    "",
    response_model=AnnouncementRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Announcement",
    responses={400: {"description": "Missing title, content or author name"}},
)
async def create_announcement(body: AnnouncementCreate, session: SessionDep) -> AnnouncementRead:
    author = body.author or PersonRef(name="")
    require_fields(title=body.title, content=body.content, **{"author.name": author.name})

    announcement = await AnnouncementRepository(session).create(
        Announcement(
            title=body.title,
            content=body.content,
            author_name=author.name,
            author_avatar_url=author.avatar_url,
        )
    )
    logger.info(f"Announcement {announcement.id} posted by {announcement.author_name}")
    return _to_read(announcement)


@router.delete(
    "/{announcement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Announcement",
    responses={404: {"description": "Announcement not found"}},
)
async def delete_announcement(announcement_id: int, session: SessionDep) -> None:
    if not await AnnouncementRepository(session).delete(announcement_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Announcement {announcement_id} not found")
