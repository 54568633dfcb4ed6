"""
AcrossMedia SQLAlchemy Models

Models Overview:
================
- Base: Declarative base and timestamp mixin
- Account: Admin-portal identity with role/status lifecycle
- Project: Portfolio project
- Video: External video with cached provider metadata
- ContactSubmission: Public contact form message

Usage:
======
    from acrossmedia.shared.models import Account, AccountRole, Project, Video
"""

from acrossmedia.shared.models.base import Base, TimestampMixin
from acrossmedia.shared.models.enums import (
    AccountRole,
    AccountStatus,
    ContentType,
    ContentStatus,
    ADMIN_ROLES,
    VISIBLE_PROJECT_STATUSES,
    VISIBLE_VIDEO_STATUSES,
)
from acrossmedia.shared.models.account import Account
from acrossmedia.shared.models.content import Project, Video
from acrossmedia.shared.models.contact_submission import ContactSubmission

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "AccountRole",
    "AccountStatus",
    "ContentType",
    "ContentStatus",
    "ADMIN_ROLES",
    "VISIBLE_PROJECT_STATUSES",
    "VISIBLE_VIDEO_STATUSES",
    # Models
    "Account",
    "Project",
    "Video",
    "ContactSubmission",
]
