"""
Contact Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from acrossmedia.shared.schemas.common import BaseSchema


class ContactRequest(BaseModel):
    """Public contact form. Names are letters and spaces only."""

    name: str = Field(min_length=2, max_length=100, pattern=r"^[A-Za-z\s]+$")
    email: EmailStr
    subject: str = Field(min_length=5, max_length=200)
    message: str = Field(min_length=10, max_length=1000)

    model_config = {"str_strip_whitespace": True}


class ContactSubmissionResponse(BaseSchema):
    id: UUID
    created_at: datetime


class ContactResponse(BaseModel):
    success: bool = True
    message: str
    submission: ContactSubmissionResponse
