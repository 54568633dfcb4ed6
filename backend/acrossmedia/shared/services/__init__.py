"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Adapters (YouTube, SMTP)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Commit only when a side effect must follow a durable write
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- ApprovalWorkflow: Registration, token approval, role/status/delete
- AuthService: Admin login and JWT issuance
- GalleryService: Merged, enriched, paginated public gallery
- ContentService: Project and video administration
- ContactService: Contact form submissions
- DashboardService: Admin panel counts
- NotificationDispatcher: Best-effort transactional email

Usage:
======
    from acrossmedia.shared.services import ApprovalWorkflow

    workflow = ApprovalWorkflow(db, settings=settings, dispatcher=dispatcher)
    account = await workflow.register(username, email, password)
"""

from acrossmedia.shared.services.approval_service import ApprovalWorkflow
from acrossmedia.shared.services.auth_service import AuthService
from acrossmedia.shared.services.contact_service import ContactService
from acrossmedia.shared.services.content_service import ContentService, PaginatedContent
from acrossmedia.shared.services.dashboard_service import DashboardService, DashboardStats
from acrossmedia.shared.services.gallery_service import (
    GalleryFilters,
    GalleryPage,
    GalleryService,
    GalleryViewItem,
    persist_metadata_cache,
)
from acrossmedia.shared.services.notification_service import (
    DeliveryResult,
    NotificationDispatcher,
    NotificationTemplate,
)

__all__ = [
    "ApprovalWorkflow",
    "AuthService",
    "ContactService",
    "ContentService",
    "PaginatedContent",
    "DashboardService",
    "DashboardStats",
    "GalleryFilters",
    "GalleryPage",
    "GalleryService",
    "GalleryViewItem",
    "persist_metadata_cache",
    "DeliveryResult",
    "NotificationDispatcher",
    "NotificationTemplate",
]
