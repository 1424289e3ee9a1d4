from .base_repository import SqlAlchemyRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .account_repository import SqlAlchemyAccountRepository
from .transaction_repository import SqlAlchemyTransactionRepository
from .comission_repository import SqlAlchemyComissionRepository

__all__ = [
    "SqlAlchemyRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyComissionRepository",
]
