"""
Base Data Access Object (DAO) class.

WHY: The DAO pattern separates database operations from business logic,
making the codebase more testable, maintainable, and allowing easier
database technology changes in the future.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.models.base import Base

# Type variable for model class
ModelType = TypeVar("ModelType", bound=Base)


class BaseDAO(Generic[ModelType]):
    """
    Base Data Access Object providing the persistence operations the
    services rely on: lookup by id, list, insert-or-update and delete.

    WHY: Using generics allows type-safe reuse across different models.
    The primary key column is read from the mapper, so models are free to
    name it (``pet_store_id``, ``employee_id``, ...).

    Type Parameters:
        ModelType: The SQLAlchemy model class this DAO manages
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize DAO with model class and database session.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session
        self.pk = model.__mapper__.primary_key[0]

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """
        Retrieve a single record by primary key.

        WHY: Returning Optional signals that the record might not exist,
        leaving the choice of error to the caller.

        Args:
            id: Primary key value

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.pk == id))
        return result.scalar_one_or_none()

    async def get_all(self) -> List[ModelType]:
        """
        Retrieve every record, ordered by primary key.

        Returns:
            List of model instances
        """
        result = await self.session.execute(select(self.model).order_by(self.pk))
        return list(result.scalars().all())

    async def save(self, instance: ModelType) -> ModelType:
        """
        Insert or update a record.

        WHY: Transient instances (no primary key yet) are inserted and get
        their identifier from the database; persistent ones are updated in
        place. Either way the flush happens now so the caller sees
        database-generated values, and the commit is left to the request's
        unit of work.

        Args:
            instance: Model instance to persist

        Returns:
            The same instance, refreshed from the database
        """
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """
        Delete a record.

        Cascades configured on the model's relationships apply.

        Args:
            instance: Persistent model instance to delete
        """
        await self.session.delete(instance)
        await self.session.flush()
