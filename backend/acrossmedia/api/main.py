"""
AcrossMedia API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           ACROSSMEDIA API                                   │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request context (request id, access log)             │
│   Handlers:     AcrossMediaException / validation / unexpected → JSON       │
│                              │                                              │
│                              ▼                                              │
│   Routers:  Health │ Auth │ Users │ Projects │ Videos │ Gallery │           │
│             YouTube │ Contact │ Admin                                       │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  Database │ Auth (JWT + account) │ Services │ Adapters      │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connections closed

Usage:
======
    uvicorn acrossmedia.api.main:app --host 0.0.0.0 --port 3001 --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acrossmedia.api.middleware import RequestContextMiddleware, setup_exception_handlers
from acrossmedia.api.routes import register_routes
from acrossmedia.config.settings import settings
from acrossmedia.shared.core.logging import logger
from acrossmedia.shared.db import close_db, init_db
from acrossmedia.shared.schemas.common import ErrorResponse


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup verifies the database; shutdown disposes of the pool.
    """
    logger.info(
        "Starting AcrossMedia API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    if settings.is_production and settings.SECRET_KEY == "change-me-in-production":
        logger.error("SECRET_KEY is the default value; issued tokens are forgeable")
    if not settings.YOUTUBE_API_KEY:
        logger.warning("YOUTUBE_API_KEY not set; gallery videos will use stored metadata")
    if not settings.EMAIL_ENABLED:
        logger.warning("EMAIL_ENABLED is false; notifications will only be logged")

    logger.info("AcrossMedia API started successfully")

    yield

    logger.info("Shutting down AcrossMedia API")
    await close_db()
    logger.info("AcrossMedia API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="AcrossMedia marketing site and admin portal API",
        version=settings.APP_VERSION,
        # No interactive docs in production
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            403: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
        },
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestContextMiddleware)

    # Added last so it is outermost
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
