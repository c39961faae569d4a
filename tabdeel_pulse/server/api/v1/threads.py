"""
Messaging Endpoints.

Threads are listed per user with their participants and full message history,
most recently active first. Summaries are delegated to the thread summarizer.
"""

from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tabdeel_pulse.core.database.entities import Message, Thread, User
from tabdeel_pulse.core.database.repositories import MessageRepository, ThreadRepository, UserRepository
from tabdeel_pulse.core.formatting import as_utc, clock_time
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.io import (
    MessageCreate,
    ParticipantsUpdate,
    ParticipantsUpdated,
    ThreadCreate,
    ThreadCreated,
    ThreadMessageRead,
    ThreadRead,
    ThreadSummary,
)
from tabdeel_pulse.server.services.deps import SessionDep, require_fields
from tabdeel_pulse.server.services.profiles import participant
from tabdeel_pulse.server.services.summarizer import (
    ConversationTooShortError,
    SummarizerUnavailableError,
    SummaryGenerationError,
    ThreadSummarizer,
    get_summarizer,
)

logger = get_logger(__name__)

router = APIRouter()

NO_MESSAGES_PREVIEW = "No messages yet."


def _message_to_read(message: Message, users: Dict[int, User]) -> ThreadMessageRead:
    return ThreadMessageRead(
        id=message.id,  # type: ignore[arg-type]
        user=participant(message.user_id, users),
        text=message.text,
        timestamp=clock_time(message.created_at),
    )


def _last_activity(thread: Thread, messages: List[Message]) -> datetime:
    return as_utc(messages[-1].created_at if messages else thread.created_at)


async def _get_thread_or_404(repo: ThreadRepository, thread_id: int) -> Thread:
    thread = await repo.get_by_id(thread_id)
    if thread is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Thread {thread_id} not found")
    return thread


@router.get(
    "",
    response_model=list[ThreadRead],
    summary="List Threads",
    description="Threads the given user takes part in, with participants and messages, most recently active first.",
    responses={400: {"description": "userId is missing"}},
)
async def list_threads(session: SessionDep, user_id: Optional[int] = Query(default=None, alias="userId")) -> list[ThreadRead]:
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId query parameter is required.")

    repo = ThreadRepository(session)
    threads = await repo.list_for_user(user_id)
    thread_ids = [thread.id for thread in threads]
    members = await repo.participant_ids(thread_ids)
    messages = await repo.messages(thread_ids)

    user_ids = {uid for ids in members.values() for uid in ids}
    user_ids.update(m.user_id for items in messages.values() for m in items if m.user_id is not None)
    users = await UserRepository(session).get_many(user_ids)

    threads.sort(key=lambda t: _last_activity(t, messages.get(t.id, [])), reverse=True)  # type: ignore[arg-type]
    result = []
    for thread in threads:
        thread_messages = messages.get(thread.id, [])  # type: ignore[arg-type]
        last = thread_messages[-1] if thread_messages else None
        result.append(
            ThreadRead(
                id=thread.id,  # type: ignore[arg-type]
                title=thread.title,
                participants=[participant(uid, users) for uid in members.get(thread.id, [])],  # type: ignore[arg-type]
                messages=[_message_to_read(m, users) for m in thread_messages],
                last_message=last.text if last else NO_MESSAGES_PREVIEW,
                timestamp=clock_time(last.created_at if last else thread.created_at),
                unread_count=0,
            )
        )
    return result


@router.post(
    "",
    response_model=ThreadCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create Thread",
    description="Create a thread with its participants (the creator is always included) and an optional first message.",
)
async def create_thread(body: ThreadCreate, session: SessionDep) -> ThreadCreated:
    thread = await ThreadRepository(session).create_with_participants(
        title=body.title,
        participant_ids=body.participant_ids,
        creator_id=body.creator_id,
        initial_message=(body.initial_message or "").strip() or None,
    )
    logger.info(f"Thread {thread.id} created by user {body.creator_id}")
    return ThreadCreated(thread_id=thread.id)  # type: ignore[arg-type]


@router.post(
    "/{thread_id}/messages",
    response_model=ThreadMessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Post Message",
    responses={400: {"description": "Message text is blank"}, 404: {"description": "Thread not found"}},
)
async def post_message(thread_id: int, body: MessageCreate, session: SessionDep) -> ThreadMessageRead:
    await _get_thread_or_404(ThreadRepository(session), thread_id)
    if not body.text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message text cannot be empty.")

    message = await MessageRepository(session).create(Message(thread_id=thread_id, user_id=body.user_id, text=body.text))
    users = await UserRepository(session).get_many([body.user_id])
    return _message_to_read(message, users)


@router.put(
    "/{thread_id}/participants",
    response_model=ParticipantsUpdated,
    summary="Replace Participants",
    description="Replace the participant set of a thread. The current user always stays in the thread.",
    responses={400: {"description": "Missing participantIds or currentUserId"}, 404: {"description": "Thread not found"}},
)
async def update_participants(thread_id: int, body: ParticipantsUpdate, session: SessionDep) -> ParticipantsUpdated:
    require_fields(participantIds=body.participant_ids, currentUserId=body.current_user_id)
    repo = ThreadRepository(session)
    await _get_thread_or_404(repo, thread_id)

    member_ids = await repo.replace_participants(thread_id, [body.current_user_id, *body.participant_ids])  # type: ignore[list-item,misc]
    users = await UserRepository(session).get_many(member_ids)
    return ParticipantsUpdated(participants=[participant(uid, users) for uid in member_ids])


@router.delete(
    "/{thread_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Thread",
    description="Delete a thread together with its messages and participants.",
    responses={404: {"description": "Thread not found"}},
)
async def delete_thread(thread_id: int, session: SessionDep) -> None:
    if not await ThreadRepository(session).delete(thread_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Thread {thread_id} not found")


@router.post(
    "/{thread_id}/summary",
    response_model=ThreadSummary,
    summary="Summarize Thread",
    description="Summarise the conversation into key bullet points with a generative model.",
    responses={
        400: {"description": "Conversation is too short"},
        404: {"description": "Thread not found"},
        502: {"description": "The model call failed"},
        503: {"description": "Summarisation is not configured"},
    },
)
async def summarize_thread(
    thread_id: int,
    session: SessionDep,
    summarizer: ThreadSummarizer = Depends(get_summarizer),
) -> ThreadSummary:
    repo = ThreadRepository(session)
    await _get_thread_or_404(repo, thread_id)
    messages = (await repo.messages([thread_id])).get(thread_id, [])
    users = await UserRepository(session).get_many(m.user_id for m in messages if m.user_id is not None)  # type: ignore[misc]
    lines = [(participant(m.user_id, users).name, m.text) for m in messages]

    try:
        summary = await summarizer.summarize(thread_id, lines)
    except ConversationTooShortError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except SummarizerUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e
    except SummaryGenerationError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    return ThreadSummary(thread_id=thread_id, summary=summary)
