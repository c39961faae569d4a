"""
Role entity model.

A role is a named, flat set of permission identifiers. Role ids are the
human-readable names (``Administrator``, ``Manager``...), which keeps them
stable across environments.
"""

from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Field, Text

from ..base import Base


class Role(Base, table=True):
    """Entity for a user role.

    Table: roles
    """

    __tablename__ = "roles"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    permissions: List[str] = Field(default_factory=list, sa_type=JSON)

    def __repr__(self) -> str:
        return f"Role(id={self.id}, permissions={len(self.permissions)})"
