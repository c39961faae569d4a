"""
Dashboard Endpoints.

Header-bell notifications and the home page activity feed.
"""

from typing import Optional

from fastapi import APIRouter, Query

from tabdeel_pulse.core.models.io import ActivityRead, NotificationRead
from tabdeel_pulse.server.services.dashboard import build_activity, build_notifications
from tabdeel_pulse.server.services.deps import SessionDep

router = APIRouter()


@router.get(
    "/notifications",
    response_model=list[NotificationRead],
    summary="List Notifications",
    description=(
        "Up to three pending payment approvals, followed by new-message notifications "
        "for the given user when a userId is supplied."
    ),
)
async def list_notifications(
    session: SessionDep, user_id: Optional[int] = Query(default=None, alias="userId")
) -> list[NotificationRead]:
    return await build_notifications(session, user_id)


@router.get(
    "/activity",
    response_model=list[ActivityRead],
    summary="Recent Activity",
    description="The five most recent payment decisions and new team members, newest first.",
)
async def list_activity(session: SessionDep) -> list[ActivityRead]:
    return await build_activity(session)
