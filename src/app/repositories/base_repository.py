"""Generic Repository Interface

Defines the data-access contract shared by every reporting entity.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository over a single entity type

    Predicates passed to find/find_one are SQLAlchemy column expressions
    built from the entity classes, e.g. ``Transaction.customer_id == id``.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[T]:
        """
        Retrieve entity by ID

        Args:
            entity_id: Entity identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self,
        *criteria: Any,
        options: Optional[Sequence[Any]] = None,
        order_by: Optional[Sequence[Any]] = None,
    ) -> List[T]:
        """
        Retrieve every entity matching all criteria

        Args:
            criteria: Predicates combined with AND
            options: Loader options (e.g. eager loading of relationships)
            order_by: Ordering clauses

        Returns:
            List of matching entities (possibly empty)
        """
        pass

    @abstractmethod
    async def find_one(
        self,
        *criteria: Any,
        options: Optional[Sequence[Any]] = None,
    ) -> Optional[T]:
        """
        Retrieve the first entity matching all criteria

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_and_return(self, entity: T) -> T:
        """
        Persist a new entity

        Args:
            entity: Entity to persist

        Returns:
            The persisted entity refreshed from the store
        """
        pass
