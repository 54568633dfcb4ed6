"""
Content Schemas

Request/response models for project and video administration.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from acrossmedia.shared.models.enums import ContentStatus
from acrossmedia.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTS
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    keywords: list[str] = Field(default_factory=list)
    status: ContentStatus = ContentStatus.ACTIVE
    image_url: str = Field(default="", max_length=2000)
    client: Optional[str] = Field(default=None, max_length=200)
    gallery_images: list[str] = Field(default_factory=list)


class ProjectUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    keywords: Optional[list[str]] = None
    status: Optional[ContentStatus] = None
    image_url: Optional[str] = Field(default=None, max_length=2000)
    client: Optional[str] = Field(default=None, max_length=200)
    gallery_images: Optional[list[str]] = None


class ProjectResponse(BaseSchema):
    id: UUID
    title: str
    description: str
    category: str
    keywords: list[str]
    status: ContentStatus
    image_url: str
    client: Optional[str] = None
    gallery_images: list[str]
    created_at: datetime
    updated_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# VIDEOS
# ═══════════════════════════════════════════════════════════════════════════════


class VideoCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    keywords: list[str] = Field(default_factory=list)
    status: ContentStatus = ContentStatus.ACTIVE
    url: str = Field(min_length=1, max_length=2000, description="YouTube URL")


class VideoUpdate(BaseModel):
    """Partial update; a new url re-seeds the metadata cache."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    keywords: Optional[list[str]] = None
    status: Optional[ContentStatus] = None
    url: Optional[str] = Field(default=None, min_length=1, max_length=2000)


class VideoResponse(BaseSchema):
    id: UUID
    title: str
    description: str
    category: str
    keywords: list[str]
    status: ContentStatus
    url: str
    thumbnail_url: Optional[str] = None
    duration: Optional[str] = None
    views: Optional[str] = None
    published_at: Optional[datetime] = None
    channel_title: Optional[str] = None
    created_at: datetime
    updated_at: datetime
