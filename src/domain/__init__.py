from .base import BaseModel, UTCDateTime, as_utc, generate_uuid, utc_now
from .customer import Customer
from .account import Account, AccountStatus
from .transaction import Transaction, TransactionType
from .commission import Commission

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Customer",
    "Account",
    "AccountStatus",
    "Transaction",
    "TransactionType",
    "Commission",
]
