"""
User entity model.

Users log in with email and password, belong to exactly one role and appear
as message senders, task assignees and thread participants.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ...models.domain import UserStatus
from ..base import Base
from ._columns import timestamp_type, utc_now


class User(Base, table=True):
    """Entity for a team member.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    role_id: str = Field(foreign_key="roles.id", max_length=64, index=True)
    status: str = Field(default=UserStatus.ACTIVE.value, max_length=50)
    avatar_url: Optional[str] = Field(default=None, max_length=512)
    mobile: Optional[str] = Field(default=None, max_length=50)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role_id})"
