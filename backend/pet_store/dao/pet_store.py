"""
Pet Store Data Access Object (DAO).

WHAT: Database operations for the PetStore model.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.dao.base import BaseDAO
from pet_store.models.pet_store import PetStore


class PetStoreDAO(BaseDAO[PetStore]):
    """Data Access Object for PetStore model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize PetStoreDAO.

        Args:
            session: Async database session
        """
        super().__init__(PetStore, session)
