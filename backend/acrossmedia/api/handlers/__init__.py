"""
API Handlers

Route handlers for the AcrossMedia API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer; errors travel as
AcrossMediaException subclasses to the global exception handlers.
"""

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

__all__ = [
    "auth_handler",
    "contact_handler",
    "dashboard_handler",
    "gallery_handler",
    "health_handler",
    "project_handler",
    "users_handler",
    "video_handler",
    "youtube_handler",
]
