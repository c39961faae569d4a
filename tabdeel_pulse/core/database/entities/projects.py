"""Project entity model."""

from typing import Optional

from sqlmodel import Field

from ...models.domain import ProjectStatus
from ..base import Base


class Project(Base, table=True):
    """Entity for a project.

    Table: projects
    """

    __tablename__ = "projects"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    status: str = Field(default=ProjectStatus.ACTIVE.value, max_length=50)

    def __repr__(self) -> str:
        return f"Project(id={self.id}, name={self.name}, status={self.status})"
