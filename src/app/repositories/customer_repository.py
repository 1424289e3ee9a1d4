"""Customer Repository Interface"""

import uuid
from abc import abstractmethod
from typing import Optional
from src.app.repositories.base_repository import Repository
from src.domain.customer import Customer


class CustomerRepository(Repository[Customer]):
    """Repository interface for Customer persistence"""

    @abstractmethod
    async def get_full_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        """
        Retrieve customer with accounts and transactions eagerly loaded

        Args:
            customer_id: Customer ID

        Returns:
            Customer if found, None otherwise
        """
        pass
