"""SQLAlchemy implementation of TransactionRepository"""

from src.adapter.repositories.base_repository import SqlAlchemyRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction


class SqlAlchemyTransactionRepository(SqlAlchemyRepository[Transaction], TransactionRepository):
    model = Transaction
