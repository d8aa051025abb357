"""
Pet Store Service.

WHAT: Business logic for creating, updating, listing and deleting stores.

WHY: The service layer:
1. Decides create-vs-update from the presence of an identifier
2. Copies scalar fields from the request onto the entity
3. Turns missing rows into PetStoreNotFoundError
4. Returns data-transfer shapes, never ORM instances

HOW: Orchestrates PetStoreDAO inside the caller's unit of work. Commit and
rollback belong to the session owner (see ``get_db``).
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.core.exceptions import PetStoreNotFoundError
from pet_store.dao.pet_store import PetStoreDAO
from pet_store.models import PetStore
from pet_store.schemas.pet_store import PetStoreData, PetStoreSummary
from pet_store.services.base import copy_fields, find_or_create, find_or_raise, log_extra


logger = logging.getLogger(__name__)


PET_STORE_FIELDS = (
    "pet_store_name",
    "pet_store_address",
    "pet_store_city",
    "pet_store_state",
    "pet_store_zip",
    "pet_store_phone",
)


class PetStoreService:
    """
    Service for pet store operations.

    Example:
        service = PetStoreService(session)
        created = await service.save_pet_store(PetStoreData(pet_store_name="Pets R Us"))
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize PetStoreService.

        Args:
            session: Async database session
        """
        self.session = session
        self.pet_store_dao = PetStoreDAO(session)

    async def find_pet_store_by_id(self, pet_store_id: int) -> PetStore:
        """
        Fetch a pet store entity.

        Raises:
            PetStoreNotFoundError: If no store has this ID
        """
        return await find_or_raise(self.pet_store_dao, pet_store_id, PetStoreNotFoundError)

    async def save_pet_store(self, data: PetStoreData) -> PetStoreData:
        """
        Create a pet store, or update the one identified by ``data``.

        Every scalar field is overwritten from ``data``, also on update.
        Employees and customers are never touched here.

        Args:
            data: Store representation; ``pet_store_id`` None means create

        Returns:
            Full store representation, including employee/customer summaries

        Raises:
            PetStoreNotFoundError: If ``pet_store_id`` is set but unknown
        """
        pet_store = await find_or_create(
            self.pet_store_dao, data.pet_store_id, PetStoreNotFoundError, PetStore
        )
        is_new = pet_store.pet_store_id is None

        copy_fields(pet_store, data, PET_STORE_FIELDS)
        pet_store = await self.pet_store_dao.save(pet_store)

        logger.info(
            f"{'Created' if is_new else 'Updated'} pet store {pet_store.pet_store_id}",
            extra=log_extra(pet_store_id=pet_store.pet_store_id),
        )
        return PetStoreData.model_validate(pet_store)

    async def retrieve_all_pet_stores(self) -> List[PetStoreData]:
        """
        List every pet store.

        WHY: The list view carries store scalars only; employees and
        customers are returned empty no matter how many are attached.

        Returns:
            Stores ordered by ID
        """
        pet_stores = await self.pet_store_dao.get_all()
        return [
            PetStoreData(**PetStoreSummary.model_validate(pet_store).model_dump())
            for pet_store in pet_stores
        ]

    async def retrieve_pet_store_by_id(self, pet_store_id: int) -> PetStoreData:
        """
        Get one pet store with its employee and customer summaries.

        Raises:
            PetStoreNotFoundError: If no store has this ID
        """
        pet_store = await self.find_pet_store_by_id(pet_store_id)
        return PetStoreData.model_validate(pet_store)

    async def delete_pet_store_by_id(self, pet_store_id: int) -> None:
        """
        Delete a pet store.

        Its employees are deleted with it; its customers only lose the
        patron link.

        Raises:
            PetStoreNotFoundError: If no store has this ID
        """
        pet_store = await self.find_pet_store_by_id(pet_store_id)
        await self.pet_store_dao.delete(pet_store)
        logger.info(f"Deleted pet store {pet_store_id}", extra=log_extra(pet_store_id=pet_store_id))
