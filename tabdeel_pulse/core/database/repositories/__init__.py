"""
Database repositories.

This package contains the data access layer, one module per business domain.
Every repository takes an ``AsyncSession`` and commits its own writes.
"""

from .account_heads import AccountHeadRepository
from .announcements import AnnouncementRepository
from .base import AsyncBaseRepository, AsyncCrudRepository, AsyncQueryBuilder
from .finance import CollectionRepository, DepositRepository, PaymentInstructionRepository
from .projects import ProjectRepository
from .roles import RoleRepository
from .service_jobs import JobCommentRepository, ServiceJobRepository
from .tasks import TaskRepository
from .threads import MessageRepository, ThreadRepository
from .users import UserRepository

__all__ = [
    "AccountHeadRepository",
    "AnnouncementRepository",
    "AsyncBaseRepository",
    "AsyncCrudRepository",
    "AsyncQueryBuilder",
    "CollectionRepository",
    "DepositRepository",
    "JobCommentRepository",
    "MessageRepository",
    "PaymentInstructionRepository",
    "ProjectRepository",
    "RoleRepository",
    "ServiceJobRepository",
    "TaskRepository",
    "ThreadRepository",
    "UserRepository",
]
