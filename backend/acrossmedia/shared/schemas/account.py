"""
Account Schemas

Request/response models for registration, approval, admin login and
user management.

Registration fields are deliberately loose here: format rules live in
ApprovalWorkflow so that every problem comes back as one field → message
map instead of pydantic's error list.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from acrossmedia.shared.models.enums import AccountRole, AccountStatus
from acrossmedia.shared.schemas.common import BaseSchema


class RegisterRequest(BaseModel):
    """Schema for admin portal registration."""

    username: str = Field(max_length=100)
    email: str = Field(max_length=255)
    password: str = Field(max_length=128)


class LoginRequest(BaseModel):
    """Schema for admin login; identifier is a username or an email."""

    identifier: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class RoleChangeRequest(BaseModel):
    role: str = Field(description="New role: 'user' or 'admin'")


class StatusChangeRequest(BaseModel):
    status: str = Field(description="New status: 'active', 'inactive' or 'suspended'")


class AccountResponse(BaseSchema):
    """Account as shown to admins. The approval token is never exposed."""

    id: UUID
    username: str
    email: str
    role: AccountRole
    status: AccountStatus
    approved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class RegisterResponse(BaseModel):
    message: str
    account: AccountResponse


class ApprovalResponse(BaseModel):
    message: str
    account: AccountResponse


class AuthResponse(BaseModel):
    """Schema for authentication response."""

    account: AccountResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
