"""Unit of Work Interface"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Transaction boundary for write operations

    Used as an async context manager; leaving the block without a commit
    rolls back whatever was flushed.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
