"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and the dashboard. They are kept separate from the
database entities and serialise with camelCase keys.

Modules:
- base: CamelModel base and shared small schemas
- roles, users, projects, account_heads: Administration
- finance: Payment instructions, collections, deposits, overview
- service_jobs: Service jobs and comments
- threads: Messaging
- tasks, announcements: Team coordination
- dashboard: Notifications and activity feed
"""

from .account_heads import AccountHeadCreate, AccountHeadRead, AccountHeadUpdate
from .announcements import AnnouncementCreate, AnnouncementRead
from .base import CamelModel, MessageResponse, PersonRef
from .dashboard import ActivityRead, NotificationRead
from .finance import (
    CollectionCreate,
    CollectionRead,
    DepositCreate,
    DepositRead,
    FinanceOverviewPoint,
    HistoryEntry,
    PaymentDecisionRequest,
    PaymentInstructionCreate,
    PaymentInstructionRead,
    PaymentInstructionStatusUpdate,
)
from .projects import ProjectRead, ProjectWrite
from .roles import RoleBulkItem, RoleCreate, RolePermissionsUpdate, RoleRead
from .service_jobs import JobCommentCreate, JobCommentRead, ServiceJobCreate, ServiceJobRead, ServiceJobUpdate
from .tasks import TaskCompletionUpdate, TaskCreate, TaskRead
from .threads import (
    MessageCreate,
    Participant,
    ParticipantsUpdate,
    ParticipantsUpdated,
    ThreadCreate,
    ThreadCreated,
    ThreadMessageRead,
    ThreadRead,
    ThreadSummary,
    UnreadCount,
)
from .users import LoginRequest, LoginResponse, PasswordChange, UserCreate, UserProfile, UserRead, UserUpdate

__all__ = [
    "AccountHeadCreate",
    "AccountHeadRead",
    "AccountHeadUpdate",
    "ActivityRead",
    "AnnouncementCreate",
    "AnnouncementRead",
    "CamelModel",
    "CollectionCreate",
    "CollectionRead",
    "DepositCreate",
    "DepositRead",
    "FinanceOverviewPoint",
    "HistoryEntry",
    "JobCommentCreate",
    "JobCommentRead",
    "LoginRequest",
    "LoginResponse",
    "MessageCreate",
    "MessageResponse",
    "NotificationRead",
    "Participant",
    "ParticipantsUpdate",
    "ParticipantsUpdated",
    "PasswordChange",
    "PaymentDecisionRequest",
    "PaymentInstructionCreate",
    "PaymentInstructionRead",
    "PaymentInstructionStatusUpdate",
    "PersonRef",
    "ProjectRead",
    "ProjectWrite",
    "RoleBulkItem",
    "RoleCreate",
    "RolePermissionsUpdate",
    "RoleRead",
    "ServiceJobCreate",
    "ServiceJobRead",
    "ServiceJobUpdate",
    "TaskCompletionUpdate",
    "TaskCreate",
    "TaskRead",
    "ThreadCreate",
    "ThreadCreated",
    "ThreadMessageRead",
    "ThreadRead",
    "ThreadSummary",
    "UnreadCount",
    "UserCreate",
    "UserProfile",
    "UserRead",
    "UserUpdate",
]
