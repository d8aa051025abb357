"""
Pet store API endpoints.

WHAT: RESTful API for pet stores and the employees and customers
attached to them.

WHY: Routes only marshal requests and responses; every rule about
relationships lives in the services. Error responses come from the
exception handlers registered in ``main``.

HOW: FastAPI router mounted at ``/pet_store``:
- POST/PUT create or update (the path ID wins over the body ID on PUT)
- GET lists stores (relations cleared) or returns one store in full
- DELETE removes one store; deleting every store is refused
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, status

from pet_store.core.deps import (
    get_customer_service,
    get_employee_service,
    get_pet_store_service,
)
from pet_store.core.exceptions import OperationNotAllowedError
from pet_store.schemas import (
    MAX_ID,
    CustomerData,
    EmployeeData,
    MessageResponse,
    PetStoreData,
)
from pet_store.services import CustomerService, EmployeeService, PetStoreService


router = APIRouter(prefix="/pet_store", tags=["pet_store"])

# Identifiers outside the INTEGER column range are rejected as bad requests
PetStoreId = Annotated[int, Path(ge=1, le=MAX_ID, description="Pet store ID")]
EmployeeId = Annotated[int, Path(ge=1, le=MAX_ID, description="Employee ID")]
CustomerId = Annotated[int, Path(ge=1, le=MAX_ID, description="Customer ID")]


# ============================================================================
# Pet stores
# ============================================================================


@router.post(
    "",
    response_model=PetStoreData,
    status_code=status.HTTP_201_CREATED,
    summary="Create pet store",
)
async def insert_pet_store(
    data: PetStoreData,
    service: PetStoreService = Depends(get_pet_store_service),
) -> PetStoreData:
    """
    Create a pet store.

    A ``pet_store_id`` in the body selects the update path instead.

    Raises:
        PetStoreNotFoundError (404): If the body carries an unknown ID
    """
    return await service.save_pet_store(data)


@router.put(
    "/{pet_store_id}",
    response_model=PetStoreData,
    status_code=status.HTTP_200_OK,
    summary="Update pet store",
)
async def update_pet_store(
    pet_store_id: PetStoreId,
    data: PetStoreData,
    service: PetStoreService = Depends(get_pet_store_service),
) -> PetStoreData:
    """
    Overwrite every scalar field of an existing pet store.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
    """
    data.pet_store_id = pet_store_id
    return await service.save_pet_store(data)


@router.get(
    "",
    response_model=List[PetStoreData],
    status_code=status.HTTP_200_OK,
    summary="List pet stores",
    description="Store fields only; employees and customers are always empty",
)
async def retrieve_all_pet_stores(
    service: PetStoreService = Depends(get_pet_store_service),
) -> List[PetStoreData]:
    return await service.retrieve_all_pet_stores()


@router.get(
    "/{pet_store_id}",
    response_model=PetStoreData,
    status_code=status.HTTP_200_OK,
    summary="Get pet store",
)
async def retrieve_pet_store_by_id(
    pet_store_id: PetStoreId,
    service: PetStoreService = Depends(get_pet_store_service),
) -> PetStoreData:
    """
    Get a pet store with its employee and customer summaries.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
    """
    return await service.retrieve_pet_store_by_id(pet_store_id)


@router.delete(
    "",
    status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
    summary="Delete all pet stores (not allowed)",
)
async def delete_all_pet_stores() -> None:
    raise OperationNotAllowedError(message="Deleting all pet stores is not allowed.")


@router.delete(
    "/{pet_store_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete pet store",
)
async def delete_pet_store_by_id(
    pet_store_id: PetStoreId,
    service: PetStoreService = Depends(get_pet_store_service),
) -> MessageResponse:
    """
    Delete a pet store together with its employees.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
    """
    await service.delete_pet_store_by_id(pet_store_id)
    return MessageResponse(
        message=f"Deletion of pet store with ID={pet_store_id} was successful."
    )


# ============================================================================
# Employees
# ============================================================================


@router.post(
    "/{pet_store_id}/employee",
    response_model=EmployeeData,
    status_code=status.HTTP_201_CREATED,
    summary="Add employee to pet store",
)
async def insert_employee(
    pet_store_id: PetStoreId,
    data: EmployeeData,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeData:
    """
    Hire an employee at a pet store.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
        EmployeeNotFoundError (404): If the body carries an unknown ID
        EmployeeStoreMismatchError (400): If that employee works elsewhere
    """
    return await service.save_employee(pet_store_id, data)


@router.put(
    "/{pet_store_id}/employee/{employee_id}",
    response_model=EmployeeData,
    status_code=status.HTTP_200_OK,
    summary="Update employee",
)
async def update_employee(
    pet_store_id: PetStoreId,
    employee_id: EmployeeId,
    data: EmployeeData,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeData:
    """
    Update an employee of a pet store.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
        EmployeeNotFoundError (404): If the employee doesn't exist
        EmployeeStoreMismatchError (400): If the employee works elsewhere
    """
    data.employee_id = employee_id
    return await service.save_employee(pet_store_id, data)


# ============================================================================
# Customers
# ============================================================================


@router.post(
    "/{pet_store_id}/customer",
    response_model=CustomerData,
    status_code=status.HTTP_201_CREATED,
    summary="Add customer to pet store",
)
async def insert_customer(
    pet_store_id: PetStoreId,
    data: CustomerData,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerData:
    """
    Register a customer as a patron of a pet store.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
        CustomerNotFoundError (404): If the body carries an unknown ID
        CustomerNotPatronError (400): If that customer isn't a patron here
    """
    return await service.save_customer(pet_store_id, data)


@router.put(
    "/{pet_store_id}/customer/{customer_id}",
    response_model=CustomerData,
    status_code=status.HTTP_200_OK,
    summary="Update customer",
)
async def update_customer(
    pet_store_id: PetStoreId,
    customer_id: CustomerId,
    data: CustomerData,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerData:
    """
    Update a customer of a pet store.

    Raises:
        PetStoreNotFoundError (404): If the store doesn't exist
        CustomerNotFoundError (404): If the customer doesn't exist
        CustomerNotPatronError (400): If the customer isn't a patron here
    """
    data.customer_id = customer_id
    return await service.save_customer(pet_store_id, data)
