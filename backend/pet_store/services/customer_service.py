"""
Customer Service.

WHAT: Business logic for registering customers as patrons of a pet store.

WHY: Customers and stores are many-to-many. Updating an existing customer
through a store requires that the customer already be a patron there;
otherwise the request is rejected without touching either side.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.core.exceptions import (
    CustomerNotFoundError,
    CustomerNotPatronError,
    PetStoreNotFoundError,
)
from pet_store.dao.customer import CustomerDAO
from pet_store.dao.pet_store import PetStoreDAO
from pet_store.models import Customer
from pet_store.schemas.customer import CustomerData
from pet_store.services.base import copy_fields, find_or_create, find_or_raise, log_extra


logger = logging.getLogger(__name__)


CUSTOMER_FIELDS = (
    "customer_first_name",
    "customer_last_name",
    "customer_email",
)


class CustomerService:
    """Service for customer operations."""

    def __init__(self, session: AsyncSession):
        """
        Initialize CustomerService.

        Args:
            session: Async database session
        """
        self.session = session
        self.pet_store_dao = PetStoreDAO(session)
        self.customer_dao = CustomerDAO(session)

    async def save_customer(self, pet_store_id: int, data: CustomerData) -> CustomerData:
        """
        Create or update a customer and link it to ``pet_store_id``.

        Args:
            pet_store_id: Store the customer patronizes
            data: Customer representation; ``customer_id`` None means create

        Returns:
            Customer representation with every associated store summary

        Raises:
            PetStoreNotFoundError: If the store doesn't exist
            CustomerNotFoundError: If ``customer_id`` is set but unknown
            CustomerNotPatronError: If the customer isn't a patron of the store
        """
        pet_store = await find_or_raise(self.pet_store_dao, pet_store_id, PetStoreNotFoundError)

        customer = await find_or_create(
            self.customer_dao, data.customer_id, CustomerNotFoundError, Customer
        )
        is_new = customer.customer_id is None

        if not is_new and not customer.is_patron_of(pet_store_id):
            logger.warning(
                f"Customer {customer.customer_id} is not a patron of pet store {pet_store_id}",
                extra=log_extra(customer_id=customer.customer_id, pet_store_id=pet_store_id),
            )
            raise CustomerNotPatronError(customer.customer_id, pet_store_id)

        copy_fields(customer, data, CUSTOMER_FIELDS)
        pet_store.add_customer(customer)

        customer = await self.customer_dao.save(customer)

        logger.info(
            f"{'Created' if is_new else 'Updated'} customer {customer.customer_id} "
            f"at pet store {pet_store_id}",
            extra=log_extra(customer_id=customer.customer_id, pet_store_id=pet_store_id),
        )
        return CustomerData.model_validate(customer)
