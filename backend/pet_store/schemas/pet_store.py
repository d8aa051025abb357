"""
Pydantic schemas for pet store endpoints.

WHAT: Request/response shapes for pet stores and the employee/customer
summaries nested inside a store.

WHY: One shape is used both ways. On the way in, only the scalar fields
matter (relationships are established by the services); on the way out,
the nested summaries describe the store's employees and patrons.

HOW: Pydantic v2 with ``from_attributes`` so responses are built straight
from SQLAlchemy instances.
"""

from typing import Annotated, Any, List, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from pet_store.schemas.common import MAX_ID


def sort_by(attribute: str):
    """
    Build a ``BeforeValidator`` function that orders ORM collections.

    WHY: Patron relationships are stored as sets; sorting by identifier
    keeps responses deterministic. Lists from JSON are left as given.
    """

    def _sort(value: Any) -> Any:
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=lambda item: getattr(item, attribute) or 0)
        return value

    return _sort


class PetStoreSummary(BaseModel):
    """
    Pet store scalar fields only.

    WHAT: Nested inside employee and customer representations.
    """

    model_config = ConfigDict(from_attributes=True)

    pet_store_id: Optional[int] = Field(
        default=None, ge=1, le=MAX_ID, description="Pet store ID"
    )
    pet_store_name: Optional[str] = Field(default=None, max_length=255)
    pet_store_address: Optional[str] = Field(default=None, max_length=255)
    pet_store_city: Optional[str] = Field(default=None, max_length=128)
    pet_store_state: Optional[str] = Field(default=None, max_length=128)
    pet_store_zip: Optional[str] = Field(default=None, max_length=20)
    pet_store_phone: Optional[str] = Field(default=None, max_length=40)


class PetStoreEmployee(BaseModel):
    """Employee summary nested in a pet store."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: Optional[int] = None
    employee_first_name: Optional[str] = None
    employee_last_name: Optional[str] = None
    employee_phone: Optional[str] = None
    employee_job_title: Optional[str] = None


class PetStoreCustomer(BaseModel):
    """Customer summary nested in a pet store."""

    model_config = ConfigDict(from_attributes=True)

    customer_id: Optional[int] = None
    customer_first_name: Optional[str] = None
    customer_last_name: Optional[str] = None
    customer_email: Optional[str] = None


class PetStoreData(PetStoreSummary):
    """
    Pet store request/response schema.

    WHAT: Store scalars plus employee and customer summaries.

    WHY: ``pet_store_id`` absent means "create"; present means "update".
    The list endpoint returns this shape with both collections emptied.
    """

    employees: List[PetStoreEmployee] = Field(default_factory=list)
    customers: Annotated[
        List[PetStoreCustomer], BeforeValidator(sort_by("customer_id"))
    ] = Field(default_factory=list)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "pet_store_name": "Pets R Us",
                "pet_store_address": "12 Main St",
                "pet_store_city": "Boise",
                "pet_store_state": "ID",
                "pet_store_zip": "83702",
                "pet_store_phone": "208-555-0100",
            }
        },
    )
