"""Project I/O models."""

from __future__ import annotations

from typing import Optional

from ..domain import ProjectStatus
from .base import CamelModel


class ProjectRead(CamelModel):
    id: int
    name: str
    status: str


class ProjectWrite(CamelModel):
    """Body for creating or replacing a project; both fields are required by the endpoint."""

    name: Optional[str] = None
    status: Optional[ProjectStatus] = None
