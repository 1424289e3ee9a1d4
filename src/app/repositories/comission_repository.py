"""Commission Repository Interface"""

from src.app.repositories.base_repository import Repository
from src.domain.commission import Commission


class ComissionRepository(Repository[Commission]):
    """Repository interface for Commission persistence"""
