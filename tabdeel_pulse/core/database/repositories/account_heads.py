"""Account heads repository."""

from __future__ import annotations

from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.account_heads import AccountHead
from ..entities.finance import Deposit
from .base import AsyncCrudRepository


class AccountHeadRepository(AsyncCrudRepository[AccountHead]):
    """Repository for account head data access operations."""

    default_order = (AccountHead.name.asc(),)  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AccountHead)

    async def delete(self, entity_id: str | int) -> bool:
        """Delete an account head; its deposits stay with no account head."""
        account_head = await self.get_by_id(entity_id)
        if account_head is None:
            return False
        await self.session.exec(  # type: ignore[call-overload]
            update(Deposit).where(Deposit.account_head_id == account_head.id).values(account_head_id=None)
        )
        await self.session.delete(account_head)
        await self.session.commit()
        return True
