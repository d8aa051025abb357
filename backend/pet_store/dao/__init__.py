"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and business logic,
making the codebase more testable and maintainable.
"""

from pet_store.dao.base import BaseDAO
from pet_store.dao.pet_store import PetStoreDAO
from pet_store.dao.employee import EmployeeDAO
from pet_store.dao.customer import CustomerDAO

__all__ = [
    "BaseDAO",
    "PetStoreDAO",
    "EmployeeDAO",
    "CustomerDAO",
]
