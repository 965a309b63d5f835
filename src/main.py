"""
Main FastAPI application entry point.

Wires middleware, exception handlers and routers. When
``auto_create_schema`` is enabled (development/testing), tables are
created and the RBAC graph plus bootstrap accounts are seeded on startup.
Expired one-time tokens are purged on every start.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger, get_password_service
from src.infrastructure.persistence.seeds import run_all_seeders
from src.infrastructure.persistence.token_cleanup import purge_expired_tokens
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create schema and seed (when auto_create_schema is set),
      then purge expired verification and reset tokens
    - Shutdown: Dispose database connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    db = get_database()
    logger = get_logger()

    if settings.auto_create_schema:
        await db.create_all()
        async with db.get_session() as session:
            await run_all_seeders(session, get_password_service())

    async with db.get_session() as session:
        await purge_expired_tokens(session)

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await db.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Authorization resolution service (users, roles, permissions)",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
