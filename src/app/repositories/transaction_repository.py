"""Transaction Repository Interface

Transactions are read-only for the reporting service.
"""

from src.app.repositories.base_repository import Repository
from src.domain.transaction import Transaction


class TransactionRepository(Repository[Transaction]):
    """Repository interface for Transaction persistence"""
