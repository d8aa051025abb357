"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from httpx import AsyncClient, ASGITransport

from pet_store.main import app
from pet_store.models import Base
from pet_store.db.session import get_db


# Test database URL
# WHY: Using SQLite for tests eliminates external database dependencies
# and makes tests faster.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """
    Create a test database engine.

    WHY: Function scope ensures each test gets a fresh database state,
    preventing test pollution and ensuring test isolation.
    """
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    WHY: The override mirrors ``get_db``: commit when the request succeeds,
    roll back when it raises, so API tests see the same unit-of-work
    behaviour as production.

    Yields:
        AsyncClient: HTTP client for making test requests
    """

    async def override_get_db():
        """Override database dependency with test session."""
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_pet_store_data() -> dict:
    """
    Sample pet store payload.

    WHY: Centralizing test data ensures consistency across tests.
    """
    return {
        "pet_store_name": "Pets R Us",
        "pet_store_address": "12 Main St",
        "pet_store_city": "Boise",
        "pet_store_state": "ID",
        "pet_store_zip": "83702",
        "pet_store_phone": "208-555-0100",
    }


@pytest.fixture
def sample_employee_data() -> dict:
    """Sample employee payload."""
    return {
        "employee_first_name": "Sam",
        "employee_last_name": "Rivera",
        "employee_phone": "208-555-0111",
        "employee_job_title": "Groomer",
    }


@pytest.fixture
def sample_customer_data() -> dict:
    """Sample customer payload."""
    return {
        "customer_first_name": "Ana",
        "customer_last_name": "Lopez",
        "customer_email": "a@x.com",
    }


@pytest_asyncio.fixture
async def test_pet_store(db_session: AsyncSession):
    """Create a pet store most tests can hang data off."""
    from tests.factories import PetStoreFactory

    return await PetStoreFactory.create(db_session, pet_store_name="Pets R Us")
