"""
Business logic services package.

WHY: Services contain business logic separated from API routes and data access,
following the three-layer architecture (API → Service → DAO).
"""

from pet_store.services.pet_store_service import PetStoreService
from pet_store.services.employee_service import EmployeeService
from pet_store.services.customer_service import CustomerService

__all__ = [
    "PetStoreService",
    "EmployeeService",
    "CustomerService",
]
