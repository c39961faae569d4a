"""Status and category enums."""

from __future__ import annotations

from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class ProjectStatus(str, Enum):
    ACTIVE = "Active"
    ON_HOLD = "On Hold"
    COMPLETED = "Completed"


class AccountHeadStatus(str, Enum):
    """An account head must be approved before payments can target it."""

    PENDING_APPROVAL = "Pending Approval"
    ACTIVE = "Active"


class PaymentStatus(str, Enum):
    """Lifecycle of a payment instruction.

    ``PENDING`` is the only state a decision can be taken from; ``APPROVED``
    and ``REJECTED`` are terminal.
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.PENDING


class PaymentDecision(str, Enum):
    APPROVED = "Approved"
    REJECTED = "Rejected"


class CollectionType(str, Enum):
    FULL = "Full"
    PARTIAL = "Partial"


class CollectionStatus(str, Enum):
    COLLECTED = "Collected"


class DepositStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"


class JobStatus(str, Enum):
    ASSIGNED = "Assigned"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    RESOLVED = "Resolved"


class JobPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {JobPriority.HIGH: 1, JobPriority.MEDIUM: 2, JobPriority.LOW: 3}
