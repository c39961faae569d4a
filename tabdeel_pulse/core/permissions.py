"""
Permission identifiers and role defaults.

Permissions are flat strings of the form ``<area>:<action>``. A role grants a
set of them and a check is plain set membership, except that
``system:admin`` implies every other permission.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List


class Permission(str, Enum):
    """Every permission a role can grant."""

    SYSTEM_ADMIN = "system:admin"
    USERS_CREATE = "users:create"
    USERS_READ = "users:read"
    USERS_UPDATE = "users:update"
    USERS_DELETE = "users:delete"
    USERS_RESET_PASSWORD = "users:reset_password"
    FINANCE_APPROVE = "finance:approve"
    JOBS_ASSIGN = "jobs:assign"
    ROLES_MANAGE = "roles:manage"
    PROJECTS_CREATE = "projects:create"
    PROJECTS_UPDATE = "projects:update"
    PROJECTS_DELETE = "projects:delete"
    ACCOUNTS_CREATE = "accounts:create"
    ACCOUNTS_UPDATE = "accounts:update"
    ACCOUNTS_DELETE = "accounts:delete"
    ANNOUNCEMENTS_CREATE = "announcements:create"
    ANNOUNCEMENTS_DELETE = "announcements:delete"


ALL_PERMISSIONS: FrozenSet[str] = frozenset(p.value for p in Permission)

ADMINISTRATOR = "Administrator"
MANAGER = "Manager"
TECHNICIAN = "Technician"

# Roles that ship with the system and cannot be deleted.
SYSTEM_ROLE_IDS: FrozenSet[str] = frozenset({ADMINISTRATOR, MANAGER, TECHNICIAN})

# Users of a deleted role are moved here.
FALLBACK_ROLE_ID = TECHNICIAN

DEFAULT_ROLES: List[Dict[str, object]] = [
    {
        "id": ADMINISTRATOR,
        "name": ADMINISTRATOR,
        "description": "Has all permissions and can manage the entire system.",
        "permissions": [p.value for p in Permission],
    },
    {
        "id": MANAGER,
        "name": MANAGER,
        "description": "Can manage users, projects, and approve financial transactions.",
        "permissions": [
            Permission.USERS_CREATE.value,
            Permission.USERS_READ.value,
            Permission.USERS_UPDATE.value,
            Permission.FINANCE_APPROVE.value,
            Permission.JOBS_ASSIGN.value,
            Permission.PROJECTS_CREATE.value,
            Permission.PROJECTS_UPDATE.value,
            Permission.ANNOUNCEMENTS_CREATE.value,
        ],
    },
    {
        "id": TECHNICIAN,
        "name": TECHNICIAN,
        "description": "Can view and update assigned service jobs.",
        "permissions": [
            Permission.USERS_READ.value,
            Permission.JOBS_ASSIGN.value,
        ],
    },
]

# Largest payment amount (AED) a role may approve.
FINANCIAL_LIMITS: Dict[str, int] = {
    ADMINISTRATOR: 100000,
    MANAGER: 50000,
}


def has_permission(granted: Iterable[str], permission: Permission | str) -> bool:
    """Return True when ``permission`` is granted directly or through ``system:admin``."""
    wanted = permission.value if isinstance(permission, Permission) else permission
    granted_set = set(granted)
    return Permission.SYSTEM_ADMIN.value in granted_set or wanted in granted_set


def financial_limit(role_id: str | None) -> int:
    """Approval ceiling for a role; roles without one cannot approve any amount."""
    if role_id is None:
        return 0
    return FINANCIAL_LIMITS.get(role_id, 0)


def unknown_permissions(permissions: Iterable[str]) -> List[str]:
    """Return the entries of ``permissions`` that are not known identifiers, in input order."""
    return [p for p in permissions if p not in ALL_PERMISSIONS]
