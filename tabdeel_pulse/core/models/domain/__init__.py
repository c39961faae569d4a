"""Domain-level enums shared by entities, repositories and I/O models.

Entities store these values as plain strings; the enums are the single source
of truth for which strings are valid.
"""

from .enums import (
    AccountHeadStatus,
    CollectionStatus,
    CollectionType,
    DepositStatus,
    JobPriority,
    JobStatus,
    PaymentDecision,
    PaymentStatus,
    ProjectStatus,
    UserStatus,
)

__all__ = [
    "AccountHeadStatus",
    "CollectionStatus",
    "CollectionType",
    "DepositStatus",
    "JobPriority",
    "JobStatus",
    "PaymentDecision",
    "PaymentStatus",
    "ProjectStatus",
    "UserStatus",
]
