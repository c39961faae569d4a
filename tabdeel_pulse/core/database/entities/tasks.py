"""Task entity model."""

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base
from ._columns import timestamp_type, utc_now


class Task(Base, table=True):
    """Entity for a to-do item, optionally assigned to a user.

    Table: tasks
    """

    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    deadline: Optional[date] = Field(default=None, index=True)
    is_completed: bool = Field(default=False)
    assigned_to_user_id: Optional[int] = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"Task(id={self.id}, name={self.name}, completed={self.is_completed})"
