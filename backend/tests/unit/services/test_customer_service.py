"""
Unit tests for CustomerService.

WHAT: Registering and updating customers as patrons of pet stores.

WHY: Verifies that:
1. Both sides of the patron relationship are written together
2. A customer can patronize several stores
3. Updating through a store the customer doesn't use is rejected
4. Unknown stores/customers raise NotFound and change nothing
"""

import pytest

from pet_store.core.exceptions import (
    CustomerNotFoundError,
    CustomerNotPatronError,
    PetStoreNotFoundError,
)
from pet_store.dao import CustomerDAO
from pet_store.schemas import CustomerData
from pet_store.services import CustomerService, PetStoreService
from tests.factories import CustomerFactory, PetStoreFactory


class TestCreateCustomer:
    """Tests for save_customer without a customer ID."""

    @pytest.mark.asyncio
    async def test_create_customer(self, db_session, test_pet_store, sample_customer_data):
        result = await CustomerService(db_session).save_customer(
            test_pet_store.pet_store_id, CustomerData(**sample_customer_data)
        )

        assert result.customer_id is not None
        assert result.customer_email == "a@x.com"
        assert [s.pet_store_id for s in result.pet_stores] == [test_pet_store.pet_store_id]

    @pytest.mark.asyncio
    async def test_patron_relationship_is_bidirectional(
        self, db_session, test_pet_store, sample_customer_data
    ):
        """Test that the store's customer set contains the new customer."""
        result = await CustomerService(db_session).save_customer(
            test_pet_store.pet_store_id, CustomerData(**sample_customer_data)
        )

        patrons = await CustomerDAO(db_session).get_by_pet_store(test_pet_store.pet_store_id)
        assert [c.customer_id for c in patrons] == [result.customer_id]

        store = await PetStoreService(db_session).retrieve_pet_store_by_id(
            test_pet_store.pet_store_id
        )
        assert [c.customer_id for c in store.customers] == [result.customer_id]

    @pytest.mark.asyncio
    async def test_unknown_store(self, db_session, sample_customer_data):
        with pytest.raises(PetStoreNotFoundError):
            await CustomerService(db_session).save_customer(3, CustomerData(**sample_customer_data))

        assert await CustomerDAO(db_session).get_all() == []


class TestUpdateCustomer:
    """Tests for save_customer with a customer ID."""

    @pytest.mark.asyncio
    async def test_update_overwrites_scalars(self, db_session, test_pet_store):
        customer = await CustomerFactory.create(
            db_session, pet_stores=[test_pet_store], customer_first_name="Ana"
        )

        result = await CustomerService(db_session).save_customer(
            test_pet_store.pet_store_id,
            CustomerData(customer_id=customer.customer_id, customer_first_name="Anna"),
        )

        assert result.customer_first_name == "Anna"
        assert result.customer_email is None
        assert [s.pet_store_id for s in result.pet_stores] == [test_pet_store.pet_store_id]

    @pytest.mark.asyncio
    async def test_update_is_idempotent_for_links(self, db_session, test_pet_store):
        customer = await CustomerFactory.create(db_session, pet_stores=[test_pet_store])
        service = CustomerService(db_session)

        for _ in range(2):
            await service.save_customer(
                test_pet_store.pet_store_id, CustomerData(customer_id=customer.customer_id)
            )

        patrons = await CustomerDAO(db_session).get_by_pet_store(test_pet_store.pet_store_id)
        assert len(patrons) == 1
        assert len(test_pet_store.customers) == 1

    @pytest.mark.asyncio
    async def test_not_a_patron_rejected(self, db_session, test_pet_store):
        other = await PetStoreFactory.create(db_session, pet_store_name="Other")
        customer = await CustomerFactory.create(
            db_session, pet_stores=[test_pet_store], customer_first_name="Ana"
        )

        with pytest.raises(CustomerNotPatronError) as exc_info:
            await CustomerService(db_session).save_customer(
                other.pet_store_id,
                CustomerData(customer_id=customer.customer_id, customer_first_name="X"),
            )

        assert exc_info.value.message == (
            f"Customer with ID={customer.customer_id} is not a patron of the "
            f"pet store with ID={other.pet_store_id}"
        )
        assert customer.customer_first_name == "Ana"
        assert other.customers == set()

    @pytest.mark.asyncio
    async def test_resave_under_unknown_store_keeps_links(self, db_session, test_pet_store):
        customer = await CustomerFactory.create(db_session, pet_stores=[test_pet_store])

        with pytest.raises(PetStoreNotFoundError):
            await CustomerService(db_session).save_customer(
                99, CustomerData(customer_id=customer.customer_id)
            )

        assert {s.pet_store_id for s in customer.pet_stores} == {test_pet_store.pet_store_id}

    @pytest.mark.asyncio
    async def test_update_unknown_customer(self, db_session, test_pet_store):
        with pytest.raises(CustomerNotFoundError):
            await CustomerService(db_session).save_customer(
                test_pet_store.pet_store_id, CustomerData(customer_id=31)
            )

    @pytest.mark.asyncio
    async def test_customer_of_several_stores(self, db_session, test_pet_store):
        """Test that a patron of two stores can be updated through either."""
        other = await PetStoreFactory.create(db_session, pet_store_name="Other")
        customer = await CustomerFactory.create(db_session, pet_stores=[test_pet_store, other])

        result = await CustomerService(db_session).save_customer(
            other.pet_store_id, CustomerData(customer_id=customer.customer_id)
        )

        assert [s.pet_store_id for s in result.pet_stores] == sorted(
            [test_pet_store.pet_store_id, other.pet_store_id]
        )
