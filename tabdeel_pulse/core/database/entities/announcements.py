"""Announcement entity model."""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base
from ._columns import timestamp_type, utc_now


class Announcement(Base, table=True):
    """Entity for a team-wide announcement.

    The author is denormalised (name and avatar) so announcements outlive
    the user who posted them.

    Table: announcements
    """

    __tablename__ = "announcements"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(sa_type=Text)
    author_name: str = Field(max_length=255)
    author_avatar_url: Optional[str] = Field(default=None, max_length=512)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"Announcement(id={self.id}, title={self.title})"
