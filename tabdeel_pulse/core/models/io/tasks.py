"""Task I/O models."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from .base import CamelModel, PersonRef


class TaskRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    deadline: Optional[dt.date] = None
    is_completed: bool
    assigned_to_user_id: Optional[int] = None
    assigned_to: Optional[PersonRef] = None


class TaskCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    deadline: Optional[dt.date] = None
    assigned_to_user_id: Optional[int] = None


class TaskCompletionUpdate(CamelModel):
    is_completed: bool
