"""
FastAPI dependencies for the service layer.

WHY: Dependencies give every route a service bound to the request's
database session, so a whole request runs in one unit of work.

Usage:
    @router.get("/pet_store")
    async def list_stores(service: PetStoreService = Depends(get_pet_store_service)):
        return await service.retrieve_all_pet_stores()
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pet_store.db.session import get_db
from pet_store.services import CustomerService, EmployeeService, PetStoreService


def get_pet_store_service(db: AsyncSession = Depends(get_db)) -> PetStoreService:
    return PetStoreService(db)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


def get_customer_service(db: AsyncSession = Depends(get_db)) -> CustomerService:
    return CustomerService(db)
