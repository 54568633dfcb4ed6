"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's db session and the
cached Settings. Adapters are dependencies of their own so tests can
override them:

    app.dependency_overrides[get_email_transport] = lambda: FakeTransport()
    app.dependency_overrides[get_youtube_adapter] = lambda: YouTubeAdapter(settings, client=mock)

Usage:
======
    from acrossmedia.api.dependencies.services import get_approval_workflow

    @router.post("/register")
    async def register(
        data: RegisterRequest,
        workflow: ApprovalWorkflow = Depends(get_approval_workflow),
    ):
        return await workflow.register(data.username, data.email, data.password)
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.api.dependencies.database import get_db
from acrossmedia.config.settings import Settings, get_settings
from acrossmedia.shared.adapters.email_adapter import EmailTransport, SMTPEmailAdapter
from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter
from acrossmedia.shared.services.approval_service import ApprovalWorkflow
from acrossmedia.shared.services.auth_service import AuthService
from acrossmedia.shared.services.contact_service import ContactService
from acrossmedia.shared.services.content_service import ContentService
from acrossmedia.shared.services.dashboard_service import DashboardService
from acrossmedia.shared.services.gallery_service import GalleryService
from acrossmedia.shared.services.notification_service import NotificationDispatcher


# ═══════════════════════════════════════════════════════════════════════════════
# ADAPTERS
# ═══════════════════════════════════════════════════════════════════════════════


def get_email_transport(settings: Settings = Depends(get_settings)) -> EmailTransport:
    return SMTPEmailAdapter(settings)


def get_dispatcher(
    transport: EmailTransport = Depends(get_email_transport),
) -> NotificationDispatcher:
    return NotificationDispatcher(transport)


async def get_youtube_adapter(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[YouTubeAdapter, None]:
    """YouTube adapter whose HTTP client is closed after the request."""
    adapter = YouTubeAdapter(settings)
    try:
        yield adapter
    finally:
        await adapter.aclose()


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICES
# ═══════════════════════════════════════════════════════════════════════════════


async def get_approval_workflow(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> ApprovalWorkflow:
    return ApprovalWorkflow(db, settings=settings, dispatcher=dispatcher)


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, settings=settings)


async def get_gallery_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    youtube: YouTubeAdapter = Depends(get_youtube_adapter),
) -> GalleryService:
    return GalleryService(db, settings=settings, youtube=youtube)


async def get_content_service(
    db: AsyncSession = Depends(get_db),
    youtube: YouTubeAdapter = Depends(get_youtube_adapter),
) -> ContentService:
    return ContentService(db, youtube=youtube)


async def get_contact_service(
    db: AsyncSession = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> ContactService:
    return ContactService(db, dispatcher=dispatcher)


async def get_dashboard_service(
    db: AsyncSession = Depends(get_db),
) -> DashboardService:
    return DashboardService(db)
