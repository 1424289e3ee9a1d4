"""Account Repository Interface"""

from src.app.repositories.base_repository import Repository
from src.domain.account import Account


class AccountRepository(Repository[Account]):
    """Repository interface for Account persistence"""
