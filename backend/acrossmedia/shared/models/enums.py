"""
Enums used across the application.
"""

from enum import Enum


class AccountRole(str, Enum):
    """
    Role of an account.

    PENDING accounts await approval. SUPERADMIN is the protected tier:
    never deletable and never changed by the approval workflow.
    """

    PENDING = "pending"
    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class AccountStatus(str, Enum):
    """Activity status, independent of role."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


# Roles that receive approval requests and may use the admin API
ADMIN_ROLES = frozenset({AccountRole.ADMIN, AccountRole.SUPERADMIN})


class ContentType(str, Enum):
    """Variant tag of a content item; immutable after creation."""

    PROJECT = "project"
    VIDEO = "video"


class ContentStatus(str, Enum):
    """Publication state of a project or video."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ACTIVE = "active"
    INACTIVE = "inactive"


# Statuses visible in the public gallery
VISIBLE_PROJECT_STATUSES = (ContentStatus.PUBLISHED, ContentStatus.ACTIVE)
VISIBLE_VIDEO_STATUSES = (ContentStatus.ACTIVE,)
