"""
Base repository interfaces and utilities.

``AsyncBaseRepository`` is the contract every repository honours.
``AsyncCrudRepository`` implements it for a single table and is what the
concrete repositories subclass; ``AsyncQueryBuilder`` holds the shared
filter and pagination helpers.

Every write commits immediately: one repository call is one transaction.
Repositories that must change several tables at once (role deletion, thread
creation) issue all statements before their single commit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """CRUD contract over one SQLModel entity class."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Insert ``entity`` and return it with generated columns filled in."""

    @abstractmethod
    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        """Primary-key lookup; ``None`` when absent."""

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Persist changes already made on ``entity``."""

    @abstractmethod
    async def delete(self, entity_id: str | int) -> bool:
        """Delete by primary key; ``False`` when nothing was there."""

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """Rows in the repository's default order, optionally filtered and paginated."""


class AsyncCrudRepository(AsyncBaseRepository[EntityType]):
    """Single-table implementation of ``AsyncBaseRepository``.

    Subclasses call ``super().__init__(session, Entity)`` and set
    ``default_order`` to the column expressions ``list`` sorts by.
    """

    default_order: ClassVar[Sequence[Any]] = ()

    async def _save(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def create(self, entity: EntityType) -> EntityType:
        return await self._save(entity)

    async def update(self, entity: EntityType) -> EntityType:
        return await self._save(entity)

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def delete(self, entity_id: str | int) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[EntityType]:
        stmt = AsyncQueryBuilder.apply_filters(select(self.model), self.model, filters or {})
        stmt = AsyncQueryBuilder.apply_pagination(stmt.order_by(*self.default_order), limit, offset)
        return list(await self.session.exec(stmt))

    async def apply_changes(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        """Assign ``changes`` onto ``entity`` and persist it.

        Keys that are not attributes of the entity are ignored, so a request
        model dump can be passed straight through.
        """
        for key, value in changes.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        return await self._save(entity)


class AsyncQueryBuilder:
    """Helpers that add common clauses to a ``select`` statement."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Add an equality ``WHERE`` per filter; ``None`` values and unknown columns are skipped."""
        for column, value in filters.items():
            if value is None or not hasattr(model, column):
                continue
            stmt = stmt.where(getattr(model, column) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Add ``LIMIT``/``OFFSET`` when given."""
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
