"""
Pydantic schemas for customer endpoints.

WHAT: Customer request/response shape with summaries of every store the
customer patronizes.
"""

from typing import Annotated, List, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from pet_store.schemas.common import MAX_ID
from pet_store.schemas.pet_store import PetStoreSummary, sort_by


class CustomerData(BaseModel):
    """
    Customer request/response schema.

    WHY: ``customer_id`` absent means "new customer"; present means
    "update the customer with this ID". ``pet_stores`` is filled in on
    responses only.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "customer_first_name": "Ana",
                "customer_last_name": "Lopez",
                "customer_email": "a@x.com",
            }
        },
    )

    customer_id: Optional[int] = Field(
        default=None, ge=1, le=MAX_ID, description="Customer ID"
    )
    customer_first_name: Optional[str] = Field(default=None, max_length=128)
    customer_last_name: Optional[str] = Field(default=None, max_length=128)
    customer_email: Optional[str] = Field(default=None, max_length=255)

    pet_stores: Annotated[
        List[PetStoreSummary], BeforeValidator(sort_by("pet_store_id"))
    ] = Field(
        default_factory=list,
        description="Stores the customer is a patron of (response only)",
    )
