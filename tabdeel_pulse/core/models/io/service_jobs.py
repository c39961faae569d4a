"""Service job and job comment I/O models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..domain import JobPriority, JobStatus
from .base import CamelModel, PersonRef


class ServiceJobRead(CamelModel):
    id: int
    title: str
    project: str
    technician: PersonRef
    status: str
    priority: str


class ServiceJobCreate(CamelModel):
    title: str = Field(min_length=1)
    project: str = Field(min_length=1)
    technician: PersonRef
    priority: JobPriority = JobPriority.MEDIUM


class ServiceJobUpdate(CamelModel):
    status: Optional[JobStatus] = None
    priority: Optional[JobPriority] = None


class JobCommentRead(CamelModel):
    id: int
    user: PersonRef
    text: str
    timestamp: str = Field(description="Relative time, e.g. '2 hours ago'")


class JobCommentCreate(CamelModel):
    text: str = Field(min_length=1)
    user_id: int
