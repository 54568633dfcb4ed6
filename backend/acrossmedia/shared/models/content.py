"""
Content Models

The two content variants shown on the public site.

    Project  ← portfolio entry with a cover image and optional gallery
    Video    ← link to an external video plus a cache of its last known metadata

Both live in their own table; the gallery merges them at read time.

SAMPLE VIDEO RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1b4e28ba-2fa1-11d2-883f-0016d3cca427                      │
│ title            │ "Launch Film"                                             │
│ category         │ "Branded Content"                                         │
│ status           │ "active"                                                  │
│ url              │ "https://youtube.com/shorts/i0hQSDmj62I"                  │
│ thumbnail_url    │ "https://i.ytimg.com/vi/i0hQSDmj62I/hqdefault.jpg"        │
│ duration         │ "0:58"                                                    │
│ views            │ "15230"                                                   │
│ published_at     │ 2025-01-20T12:00:00Z                                      │
│ channel_title    │ "AcrossMedia"                                             │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy import DateTime, Enum as SQLEnum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from acrossmedia.shared.models.base import Base, TimestampMixin
from acrossmedia.shared.models.enums import ContentStatus, ContentType


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class ContentMixin(TimestampMixin):
    """Columns shared by projects and videos."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Free-text label, e.g. "Branded Content" or "Sponsorships"
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    keywords: Mapped[list[str]] = mapped_column(nullable=False, default=list)

    status: Mapped[ContentStatus] = mapped_column(
        SQLEnum(ContentStatus, name="content_status", values_callable=_enum_values),
        nullable=False,
        default=ContentStatus.ACTIVE,
        index=True,
    )


class Project(Base, ContentMixin):
    """Portfolio project."""

    __tablename__ = "projects"

    content_type = ContentType.PROJECT

    image_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    client: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    gallery_images: Mapped[list[str]] = mapped_column(nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title={self.title!r})>"


class Video(Base, ContentMixin):
    """
    Externally hosted video.

    The thumbnail_url..channel_title columns cache the last metadata seen
    from the provider; the gallery refreshes them opportunistically.
    """

    __tablename__ = "videos"

    content_type = ContentType.VIDEO

    url: Mapped[str] = mapped_column(Text, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # CACHED PROVIDER METADATA
    # ═══════════════════════════════════════════════════════════════════════════

    thumbnail_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    views: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    published_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    channel_title: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    def __repr__(self) -> str:
        return f"<Video(id={self.id}, url={self.url!r})>"
