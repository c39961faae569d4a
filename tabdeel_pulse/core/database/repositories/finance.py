"""
Finance repositories.

Payment instructions carry their own approval trail in ``history``; the JSON
list is always replaced, never mutated in place, so SQLAlchemy sees the change.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ...models.domain import PaymentStatus
from ..entities.account_heads import AccountHead
from ..entities.finance import Collection, Deposit, PaymentInstruction
from .base import AsyncCrudRepository


class PaymentInstructionRepository(AsyncCrudRepository[PaymentInstruction]):
    """Repository for payment instructions, newest first."""

    default_order = (PaymentInstruction.id.desc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PaymentInstruction)

    async def list_pending(self, limit: Optional[int] = None) -> List[PaymentInstruction]:
        return await self.list(limit=limit, filters={"status": PaymentStatus.PENDING.value})

    async def list_approved_due_since(self, start: date) -> List[PaymentInstruction]:
        stmt = select(PaymentInstruction).where(
            PaymentInstruction.status == PaymentStatus.APPROVED.value,
            PaymentInstruction.due_date >= start,
        )
        result = await self.session.exec(stmt)
        return list(result)

    async def record_status(
        self,
        instruction: PaymentInstruction,
        status: str,
        history: List[Dict[str, Any]],
    ) -> PaymentInstruction:
        """Store a new status together with the full, updated history."""
        instruction.status = status
        instruction.history = list(history)
        return await self.update(instruction)

    async def decide_pending(self, instruction: PaymentInstruction, entry: Dict[str, Any]) -> bool:
        """Apply the decision in ``entry`` only while the row is still ``Pending``.

        The status check and the write are one ``UPDATE``, so when two
        decisions race only the first lands. ``instruction`` is refreshed
        either way.

        Returns:
            ``False`` when the instruction had already left ``Pending``
        """
        result = await self.session.exec(  # type: ignore[call-overload]
            update(PaymentInstruction)
            .where(
                PaymentInstruction.id == instruction.id,
                PaymentInstruction.status == PaymentStatus.PENDING.value,
            )
            .values(status=entry["status"], history=[*instruction.history, entry])
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        await self.session.refresh(instruction)
        return bool(result.rowcount)


class CollectionRepository(AsyncCrudRepository[Collection]):
    """Repository for collections, newest first."""

    default_order = (Collection.id.desc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Collection)

    async def list_since(self, start: date) -> List[Collection]:
        result = await self.session.exec(select(Collection).where(Collection.date >= start))
        return list(result)


class DepositRepository(AsyncCrudRepository[Deposit]):
    """Repository for deposits, newest first."""

    default_order = (Deposit.id.desc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Deposit)

    async def list_with_account_heads(self) -> List[Tuple[Deposit, Optional[str]]]:
        """Deposits paired with the name of their account head (None when unlinked)."""
        stmt = (
            select(Deposit, AccountHead.name)
            .join(AccountHead, Deposit.account_head_id == AccountHead.id, isouter=True)  # type: ignore[arg-type]
            .order_by(*self.default_order)
        )
        result = await self.session.exec(stmt)
        return [(deposit, name) for deposit, name in result]
