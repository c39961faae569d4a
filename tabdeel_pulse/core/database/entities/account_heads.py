"""
Account head entity model.

An account head is a bank account record. New records start in
``Pending Approval`` and become ``Active`` once approved.
"""

from typing import Optional

from sqlmodel import Field

from ...models.domain import AccountHeadStatus
from ..base import Base


class AccountHead(Base, table=True):
    """Entity for a bank account head.

    Table: account_heads
    """

    __tablename__ = "account_heads"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    bank_name: str = Field(max_length=255)
    account_number: str = Field(max_length=255)
    status: str = Field(default=AccountHeadStatus.PENDING_APPROVAL.value, max_length=50)

    def __repr__(self) -> str:
        return f"AccountHead(id={self.id}, name={self.name}, status={self.status})"
