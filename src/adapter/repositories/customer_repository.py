"""SQLAlchemy implementation of CustomerRepository"""

import uuid
from typing import Optional
from sqlalchemy.orm import selectinload
from src.adapter.repositories.base_repository import SqlAlchemyRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(SqlAlchemyRepository[Customer], CustomerRepository):
    """SQLAlchemy implementation of CustomerRepository"""

    model = Customer

    async def get_full_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        """
        Retrieve customer with accounts and transactions

        Relationships are loaded with SELECT IN so they stay usable after
        the async session returns.
        """
        return await self.find_one(
            Customer.id == customer_id,
            options=[
                selectinload(Customer.accounts),
                selectinload(Customer.transactions),
            ],
        )
