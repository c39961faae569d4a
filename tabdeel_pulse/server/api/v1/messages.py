"""Message Endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from tabdeel_pulse.core.database.repositories import MessageRepository
from tabdeel_pulse.core.models.io import UnreadCount
from tabdeel_pulse.server.services.dashboard import unread_thread_count
from tabdeel_pulse.server.services.deps import SessionDep

router = APIRouter()


@router.get(
    "/unread-count",
    response_model=UnreadCount,
    summary="Unread Thread Count",
    description=(
        "Number of the user's threads whose latest message came from someone else in the last 24 hours. "
        "Without a userId the count is 0."
    ),
)
async def get_unread_count(session: SessionDep, user_id: Optional[int] = Query(default=None, alias="userId")) -> UnreadCount:
    return UnreadCount(count=await unread_thread_count(session, user_id))


@router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Message",
    responses={404: {"description": "Message not found"}},
)
async def delete_message(message_id: int, session: SessionDep) -> None:
    if not await MessageRepository(session).delete(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Message {message_id} not found")
