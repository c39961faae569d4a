"""
Messaging I/O models.

Thread listings are denormalised for the chat view: each thread carries its
participants, its messages and a preview of the last message.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class Participant(CamelModel):
    id: int
    name: str
    avatar_url: Optional[str] = None


class ThreadMessageRead(CamelModel):
    id: int
    user: Participant
    text: str
    timestamp: str = Field(description="Time of day the message was sent, HH:MM")


class ThreadRead(CamelModel):
    id: int
    title: str
    participants: List[Participant]
    messages: List[ThreadMessageRead]
    last_message: str
    timestamp: str
    unread_count: int = 0


class ThreadCreate(CamelModel):
    title: str = Field(min_length=1)
    initial_message: Optional[str] = None
    participant_ids: List[int] = Field(default_factory=list)
    creator_id: int


class ThreadCreated(CamelModel):
    success: bool = True
    thread_id: int


class MessageCreate(CamelModel):
    text: str
    user_id: int


class ParticipantsUpdate(CamelModel):
    participant_ids: Optional[List[int]] = None
    current_user_id: Optional[int] = None


class ParticipantsUpdated(CamelModel):
    success: bool = True
    participants: List[Participant]


class ThreadSummary(CamelModel):
    thread_id: int
    summary: str


class UnreadCount(CamelModel):
    count: int
