"""
Database entity models.

This package contains all database entity models organized by business domain.
Importing it registers every table on ``Base.metadata``.

Modules:
- roles: Roles and their permission sets
- users: Team members and their credentials
- projects: Projects jobs and collections refer to
- account_heads: Bank accounts deposits are made into
- finance: Payment instructions, collections and deposits
- service_jobs: Service jobs and their comments
- threads: Message threads, participants and messages
- tasks: To-do items optionally assigned to a user
- announcements: Team-wide announcements
"""

from .account_heads import AccountHead
from .announcements import Announcement
from .finance import Collection, Deposit, PaymentInstruction
from .projects import Project
from .roles import Role
from .service_jobs import JobComment, ServiceJob
from .tasks import Task
from .threads import Message, Thread, ThreadParticipant
from .users import User

__all__ = [
    "AccountHead",
    "Announcement",
    "Collection",
    "Deposit",
    "JobComment",
    "Message",
    "PaymentInstruction",
    "Project",
    "Role",
    "ServiceJob",
    "Task",
    "Thread",
    "ThreadParticipant",
    "User",
]
