"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, error responses
- account: Registration, approval, login and user management
- content: Project and video administration
- gallery: Public gallery and YouTube lookup
- contact: Contact form
- dashboard: Admin panel counts

Usage:
======
    from acrossmedia.shared.schemas.account import RegisterRequest, AccountResponse
    from acrossmedia.shared.schemas.common import PaginatedResponse, ErrorResponse
"""

from acrossmedia.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from acrossmedia.shared.schemas.account import (
    RegisterRequest,
    LoginRequest,
    RoleChangeRequest,
    StatusChangeRequest,
    AccountResponse,
    RegisterResponse,
    ApprovalResponse,
    AuthResponse,
)
from acrossmedia.shared.schemas.content import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    VideoCreate,
    VideoUpdate,
    VideoResponse,
)
from acrossmedia.shared.schemas.gallery import (
    GalleryItemResponse,
    GalleryResponse,
    VideoMetadataResponse,
)
from acrossmedia.shared.schemas.contact import (
    ContactRequest,
    ContactResponse,
    ContactSubmissionResponse,
)
from acrossmedia.shared.schemas.dashboard import DashboardResponse

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Accounts
    "RegisterRequest",
    "LoginRequest",
    "RoleChangeRequest",
    "StatusChangeRequest",
    "AccountResponse",
    "RegisterResponse",
    "ApprovalResponse",
    "AuthResponse",
    # Content
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "VideoCreate",
    "VideoUpdate",
    "VideoResponse",
    # Gallery
    "GalleryItemResponse",
    "GalleryResponse",
    "VideoMetadataResponse",
    # Contact
    "ContactRequest",
    "ContactResponse",
    "ContactSubmissionResponse",
    # Dashboard
    "DashboardResponse",
]
