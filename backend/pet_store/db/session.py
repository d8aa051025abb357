"""
Database session management.

WHY: Async database sessions are required for FastAPI's async/await pattern.
Each request gets one session, which is the unit of work: it commits when
the request succeeds and rolls back when anything raises.
"""

import logging
from typing import AsyncGenerator, Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from pet_store.core.config import settings
from pet_store.models.base import Base


logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """
    Engine keyword arguments for the configured backend.

    WHY: pool_size/max_overflow only apply to pooled server databases;
    SQLite picks its own pool class.
    """
    options: Dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not settings.is_sqlite:
        options.update(pool_size=10, max_overflow=20)
    return options


# Create async engine
engine = create_async_engine(settings.async_database_url, **_engine_options())

# Create session factory
# WHY: expire_on_commit=False prevents lazy-loading issues after commit.
# autoflush=False gives explicit control over when SQL is emitted.
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    WHY: The try/except/finally makes every request atomic: relationship
    mutations made before a failure are discarded with the rollback.

    Yields:
        AsyncSession: Database session for the request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables() -> None:
    """
    Create all tables that don't exist yet.

    WHY: Convenient for local SQLite runs; production schemas are managed
    through Alembic migrations.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")
