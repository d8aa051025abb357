"""
Lookup helpers shared by the services.

WHAT: Resolve an entity by identifier, or decide that a new one is needed.

WHY: Every save operation starts with the same decision: no identifier
means "create", an identifier means "update the row that must exist".
Making that decision in one place keeps NotFound handling uniform.
"""

from typing import Any, Callable, Dict, Optional, Type

from pet_store.core.exceptions import ResourceNotFoundError
from pet_store.dao.base import BaseDAO, ModelType
from pet_store.middleware.request_context import get_request_context


async def find_or_raise(
    dao: BaseDAO[ModelType],
    entity_id: int,
    not_found: Type[ResourceNotFoundError],
) -> ModelType:
    """
    Fetch an entity by ID.

    Args:
        dao: DAO for the entity type
        entity_id: Identifier to look up
        not_found: Exception class raised (with the ID) when absent

    Returns:
        The persistent entity

    Raises:
        ResourceNotFoundError: Subclass given by ``not_found``
    """
    entity = await dao.get_by_id(entity_id)
    if entity is None:
        raise not_found(entity_id)
    return entity


async def find_or_create(
    dao: BaseDAO[ModelType],
    entity_id: Optional[int],
    not_found: Type[ResourceNotFoundError],
    factory: Callable[[], ModelType],
) -> ModelType:
    """
    Resolve the target of a save operation.

    Args:
        dao: DAO for the entity type
        entity_id: Identifier from the request, None for a new entity
        not_found: Exception class raised when ``entity_id`` is unknown
        factory: Builds a new, transient entity

    Returns:
        A new transient entity or the existing persistent one
    """
    if entity_id is None:
        return factory()
    return await find_or_raise(dao, entity_id, not_found)


def copy_fields(target, source, fields) -> None:
    """
    Overwrite ``fields`` on ``target`` with the values from ``source``.

    Values are copied unconditionally, including None, so an update is a
    full overwrite of the scalar fields.
    """
    for field in fields:
        setattr(target, field, getattr(source, field))


def log_extra(**fields: Any) -> Dict[str, Any]:
    """
    Build the ``extra`` mapping for a service log record.

    Adds the current request's ID when called inside a request, so service
    records line up with the access log line for the same request.
    """
    ctx = get_request_context()
    if ctx:
        fields["request_id"] = ctx.request_id
    return fields
