"""SQLAlchemy implementation of the generic Repository

Concrete repositories only bind the entity class; querying, loading and
inserting are shared.
"""

import uuid
from typing import Any, List, Optional, Sequence, Type
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.base_repository import Repository, T


class SqlAlchemyRepository(Repository[T]):
    """
    SQLAlchemy implementation of Repository

    Subclasses set ``model`` to the SQLModel table class they serve.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find(
        self,
        *criteria: Any,
        options: Optional[Sequence[Any]] = None,
        order_by: Optional[Sequence[Any]] = None,
    ) -> List[T]:
        stmt = select(self.model).where(*criteria)
        if options:
            stmt = stmt.options(*options)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_one(
        self,
        *criteria: Any,
        options: Optional[Sequence[Any]] = None,
    ) -> Optional[T]:
        stmt = select(self.model).where(*criteria)
        if options:
            stmt = stmt.options(*options)
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def add_and_return(self, entity: T) -> T:
        """
        Persist a new entity

        The entity is flushed, not committed; committing is left to the
        caller's unit of work.
        """
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
