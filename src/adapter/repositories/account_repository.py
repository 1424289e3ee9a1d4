"""SQLAlchemy implementation of AccountRepository"""

from src.adapter.repositories.base_repository import SqlAlchemyRepository
from src.app.repositories.account_repository import AccountRepository
from src.domain.account import Account


class SqlAlchemyAccountRepository(SqlAlchemyRepository[Account], AccountRepository):
    model = Account
