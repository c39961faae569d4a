"""
User and authentication I/O models.

Password hashes never leave the server: none of the read schemas has a
password field.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..domain import UserStatus
from .base import CamelModel


class UserRead(CamelModel):
    """Schema for reading a user."""

    id: int
    name: str
    email: str
    role_id: str = Field(description="Identifier of the user's role")
    status: str
    avatar_url: Optional[str] = None
    mobile: Optional[str] = None
    created_at: Optional[datetime] = None


class UserProfile(UserRead):
    """A user together with the effective permissions of their role."""

    role: str = Field(description="Role display name")
    permissions: List[str] = Field(default_factory=list)
    financial_limit: int = Field(default=0, description="Largest payment amount (AED) this user may approve")


class UserCreate(CamelModel):
    """Schema for creating a user. The password is set to the configured default."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    role_id: str
    status: UserStatus = UserStatus.ACTIVE
    avatar_url: Optional[str] = None
    mobile: Optional[str] = None


class UserUpdate(CamelModel):
    """Schema for a partial user update; omitted fields are left unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None
    role_id: Optional[str] = None
    status: Optional[UserStatus] = None
    avatar_url: Optional[str] = None
    mobile: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    user: UserProfile


class PasswordChange(CamelModel):
    current_password: str
    new_password: str = Field(min_length=1)
