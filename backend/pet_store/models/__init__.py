"""
Database models package.

WHY: Centralizing model imports ensures Alembic can discover all models
for migration generation and makes it easier to import models elsewhere.
"""

from pet_store.models.base import Base, TimestampMixin
from pet_store.models.pet_store import PetStore, pet_store_customer
from pet_store.models.employee import Employee
from pet_store.models.customer import Customer

__all__ = [
    "Base",
    "TimestampMixin",
    "PetStore",
    "pet_store_customer",
    "Employee",
    "Customer",
]
