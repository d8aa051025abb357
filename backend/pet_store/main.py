"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures logging,
middleware, routes, exception handlers and startup hooks.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pet_store.api import pet_stores
from pet_store.core.config import settings
from pet_store.core.exception_handlers import register_exception_handlers
from pet_store.core.logging_config import setup_logging
from pet_store.db.session import create_tables
from pet_store.middleware import RequestContextMiddleware


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup/shutdown.

    WHY: Local SQLite runs need tables without running migrations first.
    """
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
    yield


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows easier testing with different configurations.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Pet store, employee and customer management API",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Register exception handlers
    # WHY: NotFound and relationship errors become 404/400 JSON bodies
    register_exception_handlers(app)

    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.VERSION}

    app.include_router(pet_stores.router, prefix=settings.API_PREFIX)

    return app


# Create app instance
# WHY: Creating the app instance here allows it to be imported by uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pet_store.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
    )
