"""
Customer Data Access Object (DAO).

WHAT: Database operations for the Customer model.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.dao.base import BaseDAO
from pet_store.models.customer import Customer
from pet_store.models.pet_store import pet_store_customer


class CustomerDAO(BaseDAO[Customer]):
    """Data Access Object for Customer model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize CustomerDAO.

        Args:
            session: Async database session
        """
        super().__init__(Customer, session)

    async def get_by_pet_store(self, pet_store_id: int) -> List[Customer]:
        """
        Get every patron of a pet store.

        Diagnostic query: the API reads patrons through
        ``PetStore.customers``. Querying the association table directly
        lets tests confirm both sides of the patron link were written.

        Args:
            pet_store_id: Pet store ID

        Returns:
            Customers ordered by ID
        """
        result = await self.session.execute(
            select(Customer)
            .join(pet_store_customer, pet_store_customer.c.customer_id == Customer.customer_id)
            .where(pet_store_customer.c.pet_store_id == pet_store_id)
            .order_by(Customer.customer_id)
        )
        return list(result.scalars().all())
