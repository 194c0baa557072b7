"""
Main FastAPI application entry point.

Builds the FastAPI application: session middleware (server-side sessions
plus guard cookies), trace middleware, RFC 7807 exception handlers and the
v1 routers.

Run:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import get_settings
from src.core.container import (
    get_cookie_cipher,
    get_database,
    get_logger,
    get_session_store,
)
from src.presentation.api.middleware.session_middleware import SessionMiddleware
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import v1_router
from src.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Create tables in development/testing (Alembic everywhere else)
    - Shutdown: Dispose of the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings = get_settings()
    logger = get_logger()
    database = get_database()

    if settings.is_development or settings.is_testing:
        await database.create_all()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        guard=settings.auth_guard_name,
    )

    yield

    await database.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings.

    Returns:
        Configured FastAPI application.

    Raises:
        RuntimeError: If ENCRYPTION_KEY is invalid.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Session authentication with remember-me tokens",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Session middleware runs inside the trace middleware (added last = outermost)
    app.add_middleware(
        SessionMiddleware,
        store=get_session_store(),
        cipher=get_cookie_cipher(),
        cookie_name=settings.session_cookie_name,
        ttl_seconds=settings.session_ttl_seconds,
        secure=settings.cookie_secure,
    )
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(app)

    app.include_router(v1_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            dict: Health status indicator.
        """
        return {"status": "healthy"}

    return app


app = create_app()
