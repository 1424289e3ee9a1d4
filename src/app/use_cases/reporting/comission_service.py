"""
Comission Service

Commission lookups by id, by transaction, and filtered listing.
"""
import logging
import uuid
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import and_, false, or_, true

from src.app.exceptions import EntityNotFoundException
from src.app.repositories.comission_repository import ComissionRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain import Commission, Transaction
from .dtos import ComissionModel
from .mappings import commission_to_model

logger = logging.getLogger(__name__)


def _unset(value: Any):
    return true() if value is None else false()


class ComissionService:
    """
    Commission lookups

    ``strict_filter`` selects how get_comissions combines its optional
    filters. When False (the default) the filters chain as
    ``c is None OR (c matches AND a is None) OR (a matches AND s is None)
    OR (s matches AND e is None) OR e matches``. When True every supplied
    filter must match.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        comission_repo: ComissionRepository,
        strict_filter: bool = False,
    ):
        self.transaction_repo = transaction_repo
        self.comission_repo = comission_repo
        self.strict_filter = strict_filter

    async def get_comission_by_id(self, comission_id: uuid.UUID) -> ComissionModel:
        comission = await self.comission_repo.get_by_id(comission_id)
        if comission is None:
            raise EntityNotFoundException(f"Comission {comission_id} not found")

        return commission_to_model(comission)

    async def get_comission_by_transaction_id(self, transaction_id: uuid.UUID) -> ComissionModel:
        """
        Get the commission charged on a transaction

        Raises:
            EntityNotFoundException: transaction missing, or it carries no commission
        """
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise EntityNotFoundException(f"Transaction {transaction_id} not found")

        comissions = await self.comission_repo.find(
            Commission.transaction_id == transaction_id,
            order_by=[Commission.created_at],
        )
        if not comissions:
            raise EntityNotFoundException(f"Comssion with transaction {transaction_id} not found")

        return commission_to_model(comissions[0])

    async def get_comissions(
        self,
        customer_id: Optional[uuid.UUID] = None,
        account_id: Optional[uuid.UUID] = None,
        date_start: Optional[datetime] = None,
        date_end: Optional[datetime] = None,
    ) -> List[ComissionModel]:
        """
        List commissions by customer, account and transaction date

        All filters are optional. Existence of the customer and account
        is not checked; unknown ids simply match nothing.
        """
        of_customer = (
            Commission.transaction.has(Transaction.customer_id == customer_id)
            if customer_id is not None else false()
        )
        of_account = (
            Commission.transaction.has(Transaction.account_id == account_id)
            if account_id is not None else false()
        )
        after_start = (
            Commission.transaction.has(Transaction.date >= date_start)
            if date_start is not None else false()
        )
        before_end = (
            Commission.transaction.has(Transaction.date <= date_end)
            if date_end is not None else false()
        )

        if self.strict_filter:
            supplied = [
                condition
                for value, condition in (
                    (customer_id, of_customer),
                    (account_id, of_account),
                    (date_start, after_start),
                    (date_end, before_end),
                )
                if value is not None
            ]
            criteria = [and_(*supplied)] if supplied else []
        else:
            criteria = [
                or_(
                    _unset(customer_id),
                    and_(of_customer, _unset(account_id)),
                    and_(of_account, _unset(date_start)),
                    and_(after_start, _unset(date_end)),
                    before_end,
                )
            ]

        comissions = await self.comission_repo.find(*criteria, order_by=[Commission.created_at])
        logger.debug(
            f"Found {len(comissions)} commissions "
            f"(customer={customer_id}, account={account_id}, start={date_start}, end={date_end}, "
            f"strict={self.strict_filter})"
        )
        return [commission_to_model(comission) for comission in comissions]
