"""
Messaging entity models.

A thread is a conversation between a set of users. ``ThreadParticipant`` is
the membership link table; ``Message`` rows are ordered by ``created_at``.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base
from ._columns import timestamp_type, utc_now


class Thread(Base, table=True):
    """Entity for a message thread.

    Table: threads
    """

    __tablename__ = "threads"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"Thread(id={self.id}, title={self.title})"


class ThreadParticipant(Base, table=True):
    """Membership of a user in a thread.

    Table: thread_participants
    """

    __tablename__ = "thread_participants"

    thread_id: int = Field(foreign_key="threads.id", primary_key=True, ondelete="CASCADE")
    user_id: int = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")


class Message(Base, table=True):
    """A single message in a thread.

    Table: messages
    """

    __tablename__ = "messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    thread_id: int = Field(foreign_key="threads.id", ondelete="CASCADE", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    text: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type(), index=True)

    def __repr__(self) -> str:
        return f"Message(id={self.id}, thread_id={self.thread_id}, user_id={self.user_id})"
