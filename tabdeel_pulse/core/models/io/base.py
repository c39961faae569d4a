"""
Shared base for API I/O models.

The dashboard speaks camelCase JSON while the Python side uses snake_case, so
every I/O model generates camelCase aliases and accepts either spelling.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PersonRef(CamelModel):
    """Display reference to a person (author, technician, assignee)."""

    name: str = Field(description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")


class MessageResponse(CamelModel):
    """Plain acknowledgement message."""

    message: str
