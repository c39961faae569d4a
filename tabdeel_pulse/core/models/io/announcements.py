"""Announcement I/O models."""

from __future__ import annotations

from typing import Optional

from .base import CamelModel, PersonRef


class AnnouncementRead(CamelModel):
    id: int
    title: str
    content: str
    author: PersonRef
    timestamp: str


class AnnouncementCreate(CamelModel):
    """title, content and author.name are required; checked by the endpoint."""

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[PersonRef] = None
