"""
Service job entity models.

A service job is a piece of field work assigned to a technician. The
technician is stored by display name and avatar rather than by user id, so a
job keeps its history even if the user record is removed.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ...models.domain import JobPriority, JobStatus
from ..base import Base
from ._columns import timestamp_type, utc_now


class ServiceJob(Base, table=True):
    """Entity for a service job.

    Table: service_jobs
    """

    __tablename__ = "service_jobs"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    project: str = Field(max_length=255)
    technician_name: str = Field(max_length=255)
    technician_avatar_url: Optional[str] = Field(default=None, max_length=512)
    status: str = Field(default=JobStatus.ASSIGNED.value, max_length=50, index=True)
    priority: str = Field(default=JobPriority.MEDIUM.value, max_length=50, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"ServiceJob(id={self.id}, title={self.title}, status={self.status})"


class JobComment(Base, table=True):
    """Comment left on a service job.

    Table: job_comments
    """

    __tablename__ = "job_comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    job_id: int = Field(foreign_key="service_jobs.id", ondelete="CASCADE", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    text: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"JobComment(id={self.id}, job_id={self.job_id})"
