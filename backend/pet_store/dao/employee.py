"""
Employee Data Access Object (DAO).

WHAT: Database operations for the Employee model.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.dao.base import BaseDAO
from pet_store.models.employee import Employee


class EmployeeDAO(BaseDAO[Employee]):
    """Data Access Object for Employee model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize EmployeeDAO.

        Args:
            session: Async database session
        """
        super().__init__(Employee, session)

    async def get_by_pet_store(self, pet_store_id: int) -> List[Employee]:
        """
        Get every employee working at a pet store.

        Diagnostic query: the API reads employees through
        ``PetStore.employees``; tests use this to check the stored rows.

        Args:
            pet_store_id: Pet store ID

        Returns:
            Employees ordered by ID
        """
        result = await self.session.execute(
            select(Employee)
            .where(Employee.pet_store_id == pet_store_id)
            .order_by(Employee.employee_id)
        )
        return list(result.scalars().all())
