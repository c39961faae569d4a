"""
Finance entity models.

This module contains the three finance tables:

- ``PaymentInstruction``: an outgoing payment awaiting a decision. Every
  status change is appended to ``history`` so the approval trail survives.
- ``Collection``: money received against a project, fully or partially.
- ``Deposit``: cash banked into an account head.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Numeric
from sqlmodel import Field

from ...models.domain import CollectionStatus, DepositStatus, PaymentStatus
from ..base import Base
from ._columns import timestamp_type, utc_now

DEFAULT_CURRENCY = "AED"


def money_type() -> Numeric:
    """Two-decimal money column returned to Python as float."""
    return Numeric(12, 2, asdecimal=False)


class PaymentInstruction(Base, table=True):
    """Entity for an outgoing payment instruction.

    Table: payment_instructions
    """

    __tablename__ = "payment_instructions"

    id: Optional[int] = Field(default=None, primary_key=True)
    payee: str = Field(max_length=255)
    amount: float = Field(sa_type=money_type())
    currency: str = Field(default=DEFAULT_CURRENCY, max_length=10)
    due_date: date
    status: str = Field(default=PaymentStatus.PENDING.value, max_length=50, index=True)
    is_recurring: bool = Field(default=False)
    next_due_date: Optional[date] = Field(default=None)
    balance: Optional[float] = Field(default=None, sa_type=money_type())
    submitted_by: str = Field(max_length=255)
    history: List[Dict[str, Any]] = Field(default_factory=list, sa_type=JSON)
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    def __repr__(self) -> str:
        return f"PaymentInstruction(id={self.id}, payee={self.payee}, amount={self.amount}, status={self.status})"


class Collection(Base, table=True):
    """Entity for money collected against a project.

    Table: collections
    """

    __tablename__ = "collections"

    id: Optional[int] = Field(default=None, primary_key=True)
    project: str = Field(max_length=255)
    payer: str = Field(max_length=255)
    amount: float = Field(sa_type=money_type())
    type: str = Field(max_length=50)
    date: date
    status: str = Field(default=CollectionStatus.COLLECTED.value, max_length=50)
    outstanding_amount: Optional[float] = Field(default=None, sa_type=money_type())
    document_url: Optional[str] = Field(default=None, max_length=512)

    def __repr__(self) -> str:
        return f"Collection(id={self.id}, project={self.project}, amount={self.amount})"


class Deposit(Base, table=True):
    """Entity for a bank deposit into an account head.

    Table: deposits
    """

    __tablename__ = "deposits"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_head_id: Optional[int] = Field(default=None, foreign_key="account_heads.id", ondelete="SET NULL")
    amount: float = Field(sa_type=money_type())
    date: date
    status: str = Field(default=DepositStatus.PENDING.value, max_length=50)
    document_url: Optional[str] = Field(default=None, max_length=512)

    def __repr__(self) -> str:
        return f"Deposit(id={self.id}, account_head_id={self.account_head_id}, amount={self.amount})"
