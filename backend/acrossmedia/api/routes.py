"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health checks
    /api/auth               → Registration, approval link, admin login
    /api/users              → Admin user management
    /api/projects           → Projects (public read, admin write)
    /api/videos             → Videos (public read, admin write)
    /api/gallery            → Public merged gallery
    /api/youtube            → Live YouTube metadata lookup
    /api/contact            → Contact form
    /api/admin              → Admin dashboard

Usage:
======
    from acrossmedia.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from acrossmedia.api.handlers import (
    auth_handler,
    contact_handler,
    dashboard_handler,
    gallery_handler,
    health_handler,
    project_handler,
    users_handler,
    video_handler,
    youtube_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(health_handler.router, tags=["Health"])

    app.include_router(auth_handler.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(users_handler.router, prefix="/api/users", tags=["Users"])
    app.include_router(project_handler.router, prefix="/api/projects", tags=["Projects"])
    app.include_router(video_handler.router, prefix="/api/videos", tags=["Videos"])
    app.include_router(gallery_handler.router, prefix="/api/gallery", tags=["Gallery"])
    app.include_router(youtube_handler.router, prefix="/api/youtube", tags=["YouTube"])
    app.include_router(contact_handler.router, prefix="/api/contact", tags=["Contact"])
    app.include_router(dashboard_handler.router, prefix="/api/admin", tags=["Admin"])
