"""
Finance I/O models: payment instructions, collections, deposits and the
monthly income/expense overview.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import Field

from ..domain import CollectionType, PaymentDecision, PaymentStatus
from .base import CamelModel


class HistoryEntry(CamelModel):
    """One step in a payment instruction's approval trail."""

    status: PaymentStatus
    user: str = Field(description="Name of the person who made the change")
    timestamp: str = Field(description="ISO-8601 time of the change")
    remarks: Optional[str] = None


class PaymentInstructionRead(CamelModel):
    id: int
    payee: str
    amount: float
    currency: str
    due_date: dt.date
    status: PaymentStatus
    is_recurring: bool
    next_due_date: Optional[dt.date] = None
    balance: Optional[float] = None
    submitted_by: str
    history: List[HistoryEntry] = Field(default_factory=list)


class PaymentInstructionCreate(CamelModel):
    """Body for submitting a payment instruction.

    payee, amount, dueDate and submittedBy are required; the endpoint reports
    any that are missing in one 400 response.
    """

    payee: Optional[str] = None
    amount: Optional[float] = None
    currency: str = "AED"
    due_date: Optional[dt.date] = None
    is_recurring: bool = False
    next_due_date: Optional[dt.date] = None
    balance: Optional[float] = None
    submitted_by: Optional[str] = None


class PaymentInstructionStatusUpdate(CamelModel):
    """Raw status and history replacement, as sent by the dashboard."""

    status: Optional[PaymentStatus] = None
    history: Optional[List[HistoryEntry]] = None


class PaymentDecisionRequest(CamelModel):
    decision: PaymentDecision
    remarks: Optional[str] = None


class CollectionRead(CamelModel):
    id: int
    project: str
    payer: str
    amount: float
    type: str
    date: dt.date
    status: str
    outstanding_amount: Optional[float] = None
    document_url: Optional[str] = None


class CollectionCreate(CamelModel):
    project: str = Field(min_length=1)
    payer: str = Field(min_length=1)
    amount: float = Field(gt=0)
    type: CollectionType
    date: dt.date
    outstanding_amount: Optional[float] = Field(default=None, ge=0)
    document_url: Optional[str] = None


class DepositRead(CamelModel):
    id: int
    account_head_id: Optional[int] = None
    account_head: Optional[str] = Field(default=None, description="Name of the account head")
    amount: float
    date: dt.date
    status: str
    document_url: Optional[str] = None


class DepositCreate(CamelModel):
    account_head_id: int
    amount: float = Field(gt=0)
    date: dt.date
    document_url: Optional[str] = None


class FinanceOverviewPoint(CamelModel):
    """Income and approved expenses for one calendar month."""

    name: str = Field(description="Short month name, e.g. Jan")
    income: float
    expenses: float
