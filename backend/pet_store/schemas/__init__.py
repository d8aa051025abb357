"""Pydantic schemas (data-transfer shapes) for the pet store API."""

from pet_store.schemas.pet_store import (
    PetStoreCustomer,
    PetStoreData,
    PetStoreEmployee,
    PetStoreSummary,
)
from pet_store.schemas.employee import EmployeeData
from pet_store.schemas.customer import CustomerData
from pet_store.schemas.common import MAX_ID, MessageResponse

__all__ = [
    "PetStoreCustomer",
    "PetStoreData",
    "PetStoreEmployee",
    "PetStoreSummary",
    "EmployeeData",
    "CustomerData",
    "MessageResponse",
    "MAX_ID",
]
