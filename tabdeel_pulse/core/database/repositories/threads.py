"""
Messaging repositories.

Thread creation and participant replacement touch several tables; both are
done inside a single commit so a failure leaves nothing half-written.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete as sql_delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.threads import Message, Thread, ThreadParticipant
from .base import AsyncCrudRepository


class ThreadRepository(AsyncCrudRepository[Thread]):
    """Repository for threads and their participant lists."""

    default_order = (Thread.created_at.desc(), Thread.id.desc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Thread)

    async def create_with_participants(
        self,
        *,
        title: str,
        participant_ids: Iterable[int],
        creator_id: int,
        initial_message: Optional[str] = None,
    ) -> Thread:
        """Create a thread, its participant set and optionally the first message.

        The creator is always a participant and duplicate ids are dropped.
        """
        thread = Thread(title=title)
        self.session.add(thread)
        await self.session.flush()

        for user_id in dict.fromkeys([creator_id, *participant_ids]):
            self.session.add(ThreadParticipant(thread_id=thread.id, user_id=user_id))
        if initial_message:
            self.session.add(Message(thread_id=thread.id, user_id=creator_id, text=initial_message))

        await self.session.commit()
        await self.session.refresh(thread)
        return thread

    async def list_for_user(self, user_id: int) -> List[Thread]:
        stmt = (
            select(Thread)
            .join(ThreadParticipant, ThreadParticipant.thread_id == Thread.id)  # type: ignore[arg-type]
            .where(ThreadParticipant.user_id == user_id)
            .order_by(*self.default_order)
        )
        result = await self.session.exec(stmt)
        return list(result)

    async def participant_ids(self, thread_ids: Iterable[int]) -> Dict[int, List[int]]:
        """Map each thread id to its participant user ids."""
        ids = list(thread_ids)
        members: Dict[int, List[int]] = defaultdict(list)
        if not ids:
            return members
        stmt = (
            select(ThreadParticipant)
            .where(ThreadParticipant.thread_id.in_(ids))  # type: ignore[attr-defined]
            .order_by(ThreadParticipant.thread_id, ThreadParticipant.user_id)
        )
        for participant in await self.session.exec(stmt):
            members[participant.thread_id].append(participant.user_id)
        return members

    async def messages(self, thread_ids: Iterable[int]) -> Dict[int, List[Message]]:
        """Map each thread id to its messages in the order they were written."""
        ids = list(thread_ids)
        grouped: Dict[int, List[Message]] = defaultdict(list)
        if not ids:
            return grouped
        stmt = (
            select(Message)
            .where(Message.thread_id.in_(ids))  # type: ignore[attr-defined]
            .order_by(Message.created_at.asc(), Message.id.asc())  # type: ignore[attr-defined,union-attr]
        )
        for message in await self.session.exec(stmt):
            grouped[message.thread_id].append(message)
        return grouped

    async def latest_messages(self, thread_ids: Iterable[int]) -> Dict[int, Message]:
        """Map each thread id to its most recent message; threads without messages are absent."""
        return {thread_id: items[-1] for thread_id, items in (await self.messages(thread_ids)).items() if items}

    async def replace_participants(self, thread_id: int, user_ids: Iterable[int]) -> List[int]:
        """Swap the participant set of a thread for ``user_ids`` (deduplicated)."""
        unique_ids = list(dict.fromkeys(user_ids))
        await self.session.exec(  # type: ignore[call-overload]
            sql_delete(ThreadParticipant).where(ThreadParticipant.thread_id == thread_id)
        )
        for user_id in unique_ids:
            self.session.add(ThreadParticipant(thread_id=thread_id, user_id=user_id))
        await self.session.commit()
        return unique_ids

    async def delete(self, entity_id: str | int) -> bool:
        """Delete a thread with its messages and participants."""
        thread = await self.get_by_id(entity_id)
        if thread is None:
            return False
        await self.session.exec(sql_delete(Message).where(Message.thread_id == thread.id))  # type: ignore[call-overload]
        await self.session.exec(  # type: ignore[call-overload]
            sql_delete(ThreadParticipant).where(ThreadParticipant.thread_id == thread.id)
        )
        await self.session.delete(thread)
        await self.session.commit()
        return True


class MessageRepository(AsyncCrudRepository[Message]):
    """Repository for individual messages."""

    default_order = (Message.created_at.asc(), Message.id.asc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)
