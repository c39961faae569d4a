"""Notification and activity feed I/O models."""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel, PersonRef


class NotificationRead(CamelModel):
    id: str = Field(description="Source-prefixed id, e.g. payment_12 or msg_40")
    title: str
    description: str
    timestamp: str
    read: bool = False
    icon_name: str
    link: str = Field(description="Dashboard page the notification opens")


class ActivityRead(CamelModel):
    id: str = Field(description="Source-prefixed id, e.g. p-12 or u-7")
    user: PersonRef = Field(description="Who performed the action")
    action: str
    target: str = ""
    timestamp: str = Field(description="Relative time, e.g. '3 days ago'")
