"""
Role I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class RoleRead(CamelModel):
    """Schema for reading a role."""

    id: str
    name: str
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list, description="Granted permission identifiers")


class RoleCreate(CamelModel):
    """Schema for creating a role.

    ``id`` and ``name`` are checked by the endpoint so a missing value is
    reported as a 400 like the other required-field checks.
    """

    id: Optional[str] = Field(default=None, description="Role identifier, usually the display name")
    name: Optional[str] = Field(default=None, description="Role display name")
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)


class RolePermissionsUpdate(CamelModel):
    """Schema for replacing a role's permissions."""

    permissions: Optional[List[str]] = Field(default=None, description="Complete new permission set")


class RoleBulkItem(CamelModel):
    """One role in a bulk permission replacement."""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
