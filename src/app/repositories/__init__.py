from .base_repository import Repository
from .customer_repository import CustomerRepository
from .account_repository import AccountRepository
from .transaction_repository import TransactionRepository
from .comission_repository import ComissionRepository

__all__ = [
    "Repository",
    "CustomerRepository",
    "AccountRepository",
    "TransactionRepository",
    "ComissionRepository",
]
