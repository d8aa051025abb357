"""
Pydantic schemas for employee endpoints.

WHAT: Employee request/response shape with the owning store's summary.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from pet_store.schemas.common import MAX_ID
from pet_store.schemas.pet_store import PetStoreSummary


class EmployeeData(BaseModel):
    """
    Employee request/response schema.

    WHY: ``employee_id`` absent means "hire a new employee"; present means
    "update the employee with this ID". ``pet_store`` is filled in on
    responses only; the store always comes from the URL.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "employee_first_name": "Sam",
                "employee_last_name": "Rivera",
                "employee_phone": "208-555-0111",
                "employee_job_title": "Groomer",
            }
        },
    )

    employee_id: Optional[int] = Field(
        default=None, ge=1, le=MAX_ID, description="Employee ID"
    )
    employee_first_name: Optional[str] = Field(default=None, max_length=128)
    employee_last_name: Optional[str] = Field(default=None, max_length=128)
    employee_phone: Optional[str] = Field(default=None, max_length=40)
    employee_job_title: Optional[str] = Field(default=None, max_length=128)

    pet_store: Optional[PetStoreSummary] = Field(
        default=None,
        description="Store the employee works at (response only)",
    )
