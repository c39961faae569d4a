"""Account head I/O models."""

from __future__ import annotations

from pydantic import Field

from ..domain import AccountHeadStatus
from .base import CamelModel


class AccountHeadRead(CamelModel):
    id: int
    name: str
    bank_name: str
    account_number: str
    status: str


class AccountHeadCreate(CamelModel):
    name: str = Field(min_length=1)
    bank_name: str = Field(min_length=1)
    account_number: str = Field(min_length=1)
    status: AccountHeadStatus = AccountHeadStatus.PENDING_APPROVAL


class AccountHeadUpdate(AccountHeadCreate):
    """Full replacement of an account head."""

    status: AccountHeadStatus
