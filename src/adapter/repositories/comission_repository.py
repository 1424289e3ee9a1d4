"""SQLAlchemy implementation of ComissionRepository"""

from src.adapter.repositories.base_repository import SqlAlchemyRepository
from src.app.repositories.comission_repository import ComissionRepository
from src.domain.commission import Commission


class SqlAlchemyComissionRepository(SqlAlchemyRepository[Commission], ComissionRepository):
    model = Commission
