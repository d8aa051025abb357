"""
Employee Service.

WHAT: Business logic for hiring and updating employees of a pet store.

WHY: An employee works at exactly one store. Addressing an existing
employee through another store is a client error, reported separately
from "no such employee".
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.core.exceptions import (
    EmployeeNotFoundError,
    EmployeeStoreMismatchError,
    PetStoreNotFoundError,
)
from pet_store.dao.employee import EmployeeDAO
from pet_store.dao.pet_store import PetStoreDAO
from pet_store.models import Employee
from pet_store.schemas.employee import EmployeeData
from pet_store.services.base import copy_fields, find_or_create, find_or_raise, log_extra


logger = logging.getLogger(__name__)


EMPLOYEE_FIELDS = (
    "employee_first_name",
    "employee_last_name",
    "employee_phone",
    "employee_job_title",
)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize EmployeeService.

        Args:
            session: Async database session
        """
        self.session = session
        self.pet_store_dao = PetStoreDAO(session)
        self.employee_dao = EmployeeDAO(session)

    async def save_employee(self, pet_store_id: int, data: EmployeeData) -> EmployeeData:
        """
        Create or update an employee of ``pet_store_id``.

        All lookups and checks run before anything is modified, so a
        failure leaves both the store and the employee untouched.

        Args:
            pet_store_id: Store the employee works at
            data: Employee representation; ``employee_id`` None means create

        Returns:
            Employee representation including the store summary

        Raises:
            PetStoreNotFoundError: If the store doesn't exist
            EmployeeNotFoundError: If ``employee_id`` is set but unknown
            EmployeeStoreMismatchError: If the employee works elsewhere
        """
        pet_store = await find_or_raise(self.pet_store_dao, pet_store_id, PetStoreNotFoundError)

        employee = await find_or_create(
            self.employee_dao, data.employee_id, EmployeeNotFoundError, Employee
        )
        is_new = employee.employee_id is None

        if not is_new and employee.pet_store_id != pet_store_id:
            logger.warning(
                f"Employee {employee.employee_id} does not work at pet store {pet_store_id}",
                extra=log_extra(employee_id=employee.employee_id, pet_store_id=pet_store_id),
            )
            raise EmployeeStoreMismatchError(employee.employee_id, pet_store_id)

        copy_fields(employee, data, EMPLOYEE_FIELDS)
        pet_store.add_employee(employee)

        employee = await self.employee_dao.save(employee)

        logger.info(
            f"{'Created' if is_new else 'Updated'} employee {employee.employee_id} "
            f"at pet store {pet_store_id}",
            extra=log_extra(employee_id=employee.employee_id, pet_store_id=pet_store_id),
        )
        return EmployeeData.model_validate(employee)
