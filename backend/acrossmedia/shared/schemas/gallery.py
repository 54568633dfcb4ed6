"""
Gallery Schemas

Response models for the public gallery and the YouTube lookup route.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from acrossmedia.shared.models.enums import ContentType
from acrossmedia.shared.schemas.common import BaseSchema


class GalleryItemResponse(BaseSchema):
    """
    One gallery entry.

    image_url is the project cover or the video thumbnail. Project-only
    and video-only fields are null on the other variant.
    """

    id: UUID
    type: ContentType
    title: str
    description: str
    category: str
    keywords: list[str]
    created_at: datetime
    image_url: Optional[str] = None

    client: Optional[str] = None
    gallery_images: list[str] = []

    url: Optional[str] = None
    duration: Optional[str] = None
    views: Optional[str] = None
    views_display: Optional[str] = None
    published_at: Optional[datetime] = None
    channel_title: Optional[str] = None


class GalleryResponse(BaseModel):
    items: list[GalleryItemResponse]
    page: int
    page_size: int
    total_pages: int
    total_count: int


class VideoMetadataResponse(BaseSchema):
    """Live YouTube metadata with display formatting applied."""

    video_id: str
    title: str
    description: str
    thumbnail_url: Optional[str] = None
    duration: str
    views: str
    views_display: str
    published_at: Optional[datetime] = None
    channel_title: Optional[str] = None
