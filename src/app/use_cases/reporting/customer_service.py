"""
Customer Service

Resolves customers by their own id or through an account or transaction
they own, and registers new customers.
"""
import logging
import uuid

from src.app.exceptions import EntityNotFoundException
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Account, Customer, Transaction
from .dtos import CustomerCreateDTO, CustomerModel, FullCustomerModel
from .mappings import customer_model_to_entity, customer_to_full_model, customer_to_model

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Customer lookups and registration

    Every lookup raises EntityNotFoundException as soon as one hop of the
    chain comes back empty; the message names the entity and key that
    were missing.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        account_repo: AccountRepository,
        transaction_repo: TransactionRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.account_repo = account_repo
        self.transaction_repo = transaction_repo

    async def get_full_customer_by_id(self, customer_id: uuid.UUID) -> FullCustomerModel:
        """
        Get a customer together with its accounts and transactions

        Raises:
            EntityNotFoundException: customer missing, or customer has no accounts
        """
        customer = await self.customer_repo.get_full_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundException(f"Customer {customer_id} not found")

        if not customer.accounts:
            raise EntityNotFoundException(f"No Accounts related to Customer {customer_id}")

        logger.debug(
            f"Loaded customer {customer_id} with {len(customer.accounts)} accounts "
            f"and {len(customer.transactions)} transactions"
        )
        return customer_to_full_model(customer)

    async def get_customer_by_id(self, customer_id: uuid.UUID) -> CustomerModel:
        customer = await self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundException(f"Customer {customer_id} not found")

        return customer_to_model(customer)

    async def get_customer_by_account_id(self, account_id: uuid.UUID) -> CustomerModel:
        """
        Get the customer owning an account

        Raises:
            EntityNotFoundException: account missing, or no customer owns it
        """
        account = await self.account_repo.get_by_id(account_id)
        if account is None:
            raise EntityNotFoundException(f"Account {account_id} not found")

        customer = await self.customer_repo.find_one(
            Customer.accounts.any(Account.id == account.id)
        )
        if customer is None:
            raise EntityNotFoundException(f"Customer with account {account_id} not found")

        return customer_to_model(customer)

    async def get_customer_by_transaction_id(self, transaction_id: uuid.UUID) -> CustomerModel:
        """
        Get the customer owning a transaction

        Raises:
            EntityNotFoundException: transaction missing, or no customer owns it
        """
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise EntityNotFoundException(f"Transaction {transaction_id} not found")

        customer = await self.customer_repo.find_one(
            Customer.transactions.any(Transaction.id == transaction.id)
        )
        if customer is None:
            raise EntityNotFoundException(f"Customer with transaction {transaction_id} not found")

        return customer_to_model(customer)

    async def add_customer(self, model: CustomerCreateDTO) -> CustomerModel:
        """
        Register a new customer

        Args:
            model: CustomerCreateDTO with the customer's details

        Returns:
            CustomerModel of the persisted customer
        """
        customer = customer_model_to_entity(model)

        async with self.uow:
            created = await self.customer_repo.add_and_return(customer)
            await self.uow.commit()

        logger.info(f"Registered customer {created.id}")
        return customer_to_model(created)
