"""
Roles repository.

Besides plain CRUD this handles the two multi-row role operations: bulk
permission replacement and deletion with reassignment of the role's users.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.roles import Role
from ..entities.users import User
from .base import AsyncCrudRepository


class RoleRepository(AsyncCrudRepository[Role]):
    """Repository for role data access operations."""

    default_order = (Role.name.asc(),)  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Role)

    async def set_permissions(self, role: Role, permissions: Iterable[str]) -> Role:
        """Replace the permission set of ``role``, keeping first-seen order."""
        role.permissions = list(dict.fromkeys(permissions))
        return await self.update(role)

    async def bulk_replace(self, roles: List[Dict[str, object]]) -> List[Role]:
        """Upsert several roles in one transaction.

        Existing roles get their permissions (and name/description when given)
        replaced; unknown ids are created.
        """
        saved: List[Role] = []
        for data in roles:
            role = await self.session.get(Role, data["id"])
            if role is None:
                role = Role(
                    id=str(data["id"]),
                    name=str(data.get("name") or data["id"]),
                    description=data.get("description"),  # type: ignore[arg-type]
                )
            else:
                if data.get("name"):
                    role.name = str(data["name"])
                if data.get("description") is not None:
                    role.description = str(data["description"])
            role.permissions = list(dict.fromkeys(data.get("permissions") or []))  # type: ignore[call-overload]
            self.session.add(role)
            saved.append(role)
        await self.session.commit()
        for role in saved:
            await self.session.refresh(role)
        return saved

    async def delete_reassigning_users(self, role_id: str, fallback_role_id: str) -> int:
        """Move every user of ``role_id`` to ``fallback_role_id`` and delete the role.

        Both steps are committed together.

        Returns:
            Number of users that were reassigned
        """
        result = await self.session.exec(  # type: ignore[call-overload]
            update(User).where(User.role_id == role_id).values(role_id=fallback_role_id)
        )
        role = await self.session.get(Role, role_id)
        if role is not None:
            await self.session.delete(role)
        await self.session.commit()
        return result.rowcount or 0
