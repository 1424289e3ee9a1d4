"""
Transaction Service

Date-range and per-account transaction searches.
"""
import logging
import uuid
from typing import List

from src.app.exceptions import EntityNotFoundException
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain import Transaction
from .dtos import TransactionModel, TransactionSearchFilter
from .mappings import transaction_to_model

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Transaction searches

    Results are ordered by transaction date, oldest first.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo

    async def search_transaction(
        self, customer_id: uuid.UUID, search_filter: TransactionSearchFilter
    ) -> List[TransactionModel]:
        """
        Search a customer's transactions within a date range

        Args:
            customer_id: Customer whose transactions are searched
            search_filter: Inclusive date bounds, either may be None

        Returns:
            List[TransactionModel]: Matching transactions

        Raises:
            EntityNotFoundException: customer missing
        """
        customer = await self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundException(f"Customer {customer_id} not found")

        criteria = [Transaction.customer_id == customer_id]
        if search_filter.date_from is not None:
            criteria.append(Transaction.date >= search_filter.date_from)
        if search_filter.date_to is not None:
            criteria.append(Transaction.date <= search_filter.date_to)

        transactions = await self.transaction_repo.find(*criteria, order_by=[Transaction.date])
        logger.debug(f"Found {len(transactions)} transactions for customer {customer_id}")

        return [transaction_to_model(txn) for txn in transactions]

    async def search_transaction_by_account(self, account_id: uuid.UUID) -> List[TransactionModel]:
        transactions = await self.transaction_repo.find(
            Transaction.account_id == account_id,
            order_by=[Transaction.date],
        )
        return [transaction_to_model(txn) for txn in transactions]
