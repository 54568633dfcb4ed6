"""
Gallery Service

Builds the public gallery feed: projects and videos merged into one
filterable, paginated list.

Pipeline:
=========
    ProjectRepository.list_by_status(published, active) ─┐
                                                          ├─► merge ─► sort ─► filter ─► page
    VideoRepository.list_by_status(active) ─► enrich ─────┘

    enrich: one YouTube lookup per video, all issued concurrently, each
    bounded by YOUTUBE_TIMEOUT_SECONDS. A failed lookup (bad URL, not
    found, timeout, provider down) falls back to the stored row; it
    never fails the page.

Display precedence for video fields: live metadata > cached columns >
defaults (views "0", channel title GALLERY_DEFAULT_CHANNEL_TITLE).

Sorting:
========
Newest first by sort date: a video's published_at when known, otherwise
created_at. Python's sort is stable, so ties keep store order.

Cache refresh:
==============
Metadata fetched live is returned in GalleryPage.refreshed. The HTTP
layer hands it to persist_metadata_cache() as a background task, which
writes it back with its own session after the response is sent.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
import math
from typing import Callable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.config.settings import Settings
from acrossmedia.shared.adapters.youtube_adapter import VideoMetadata, YouTubeAdapter
from acrossmedia.shared.core.exceptions import (
    AcrossMediaException,
    ExternalServiceError,
    InvalidVideoUrlError,
    ValidationError,
    VideoNotFoundError,
)
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.content import Project, Video
from acrossmedia.shared.models.enums import (
    VISIBLE_PROJECT_STATUSES,
    VISIBLE_VIDEO_STATUSES,
    ContentType,
)
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)
from acrossmedia.shared.utils.formatting import format_views

logger = get_logger("gallery")

ALL_TYPES = "all"
ALL_CATEGORIES = "All"


@dataclass
class GalleryFilters:
    """Query for one gallery page. page is 1-based."""

    search_term: str = ""
    type: str = ALL_TYPES
    category: str = ALL_CATEGORIES
    page: int = 1
    page_size: int = 12


@dataclass
class GalleryViewItem:
    """One gallery entry, either a project or an enriched video."""

    id: UUID
    type: ContentType
    title: str
    description: str
    category: str
    keywords: list[str]
    created_at: datetime
    sort_date: datetime
    image_url: Optional[str] = None

    # Projects
    client: Optional[str] = None
    gallery_images: list[str] = field(default_factory=list)

    # Videos
    url: Optional[str] = None
    duration: Optional[str] = None
    views: Optional[str] = None
    views_display: Optional[str] = None
    published_at: Optional[datetime] = None
    channel_title: Optional[str] = None


@dataclass
class GalleryPage:
    items: list[GalleryViewItem]
    page: int
    page_size: int
    total_pages: int
    total_count: int
    # (video id, live metadata) pairs to write back to the cache
    refreshed: list[tuple[UUID, VideoMetadata]] = field(default_factory=list)


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class GalleryService:
    """
    Service for the public gallery feed.

    Attributes:
        projects: ProjectRepository
        videos: VideoRepository
        youtube: YouTubeAdapter used for live enrichment
        settings: Application settings (timeouts, defaults)
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        settings: Settings,
        youtube: YouTubeAdapter,
    ) -> None:
        self.projects = ProjectRepository(session)
        self.videos = VideoRepository(session)
        self.youtube = youtube
        self.settings = settings

    # ═══════════════════════════════════════════════════════════════════════════
    # PUBLIC API
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_gallery_items(self, filters: GalleryFilters) -> GalleryPage:
        """
        Build one page of the gallery.

        Raises:
            ValidationError: page/page_size below 1 or unknown type
            StorageError: Either content store read failed
        """
        self._validate(filters)

        projects = await self.projects.list_by_status(VISIBLE_PROJECT_STATUSES)
        videos = await self.videos.list_by_status(VISIBLE_VIDEO_STATUSES)

        live = await asyncio.gather(*(self._fetch_live(video) for video in videos))

        items = [self._project_item(project) for project in projects]
        items.extend(self._video_item(video, metadata) for video, metadata in zip(videos, live))
        items.sort(key=lambda item: item.sort_date, reverse=True)

        matching = [item for item in items if self._matches(item, filters)]

        total_count = len(matching)
        total_pages = math.ceil(total_count / filters.page_size)
        start = (filters.page - 1) * filters.page_size

        refreshed = [
            (video.id, metadata) for video, metadata in zip(videos, live) if metadata is not None
        ]

        logger.info(
            "Gallery page built",
            page=filters.page,
            total_count=total_count,
            videos=len(videos),
            enriched=len(refreshed),
        )

        return GalleryPage(
            items=matching[start:start + filters.page_size],
            page=filters.page,
            page_size=filters.page_size,
            total_pages=total_pages,
            total_count=total_count,
            refreshed=refreshed,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # ENRICHMENT
    # ═══════════════════════════════════════════════════════════════════════════

    async def _fetch_live(self, video: Video) -> Optional[VideoMetadata]:
        """Live metadata for one video, or None when the stored row must do."""
        try:
            return await asyncio.wait_for(
                self.youtube.fetch_video_metadata(video.url),
                timeout=self.settings.YOUTUBE_TIMEOUT_SECONDS,
            )
        except InvalidVideoUrlError:
            logger.info("Video URL has no recognizable id", video_id=str(video.id), url=video.url)
        except (VideoNotFoundError, ExternalServiceError) as e:
            logger.warning(
                "Video metadata unavailable, using stored fields",
                video_id=str(video.id),
                error=e.message,
            )
        except asyncio.TimeoutError:
            logger.warning("Video metadata lookup timed out", video_id=str(video.id))
        except Exception as e:
            logger.error(
                "Video metadata lookup failed unexpectedly",
                video_id=str(video.id),
                error=str(e),
                exc_info=True,
            )
        return None

    # ═══════════════════════════════════════════════════════════════════════════
    # VIEW ITEMS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _project_item(project: Project) -> GalleryViewItem:
        created_at = _as_utc(project.created_at)
        return GalleryViewItem(
            id=project.id,
            type=ContentType.PROJECT,
            title=project.title,
            description=project.description,
            category=project.category,
            keywords=list(project.keywords or []),
            created_at=created_at,
            sort_date=created_at,
            image_url=project.image_url,
            client=project.client,
            gallery_images=list(project.gallery_images or []),
        )

    def _video_item(self, video: Video, live: Optional[VideoMetadata]) -> GalleryViewItem:
        created_at = _as_utc(video.created_at)

        if live is not None:
            title = live.title or video.title
            description = live.description or video.description
            thumbnail_url = live.thumbnail_url or video.thumbnail_url
            duration = live.duration or video.duration
            views = live.views or video.views
            published_at = live.published_at or video.published_at
            channel_title = live.channel_title or video.channel_title
        else:
            title = video.title
            description = video.description
            thumbnail_url = video.thumbnail_url
            duration = video.duration
            views = video.views
            published_at = video.published_at
            channel_title = video.channel_title

        views = views or "0"
        published_at = _as_utc(published_at) if published_at else None

        return GalleryViewItem(
            id=video.id,
            type=ContentType.VIDEO,
            title=title,
            description=description,
            category=video.category,
            keywords=list(video.keywords or []),
            created_at=created_at,
            sort_date=published_at or created_at,
            image_url=thumbnail_url,
            url=video.url,
            duration=duration or "0:00",
            views=views,
            views_display=format_views(views),
            published_at=published_at,
            channel_title=channel_title or self.settings.GALLERY_DEFAULT_CHANNEL_TITLE,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # FILTERING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _validate(filters: GalleryFilters) -> None:
        errors: dict[str, str] = {}
        if filters.page < 1:
            errors["page"] = "Page must be 1 or greater"
        if filters.page_size < 1:
            errors["page_size"] = "Page size must be 1 or greater"
        if filters.type != ALL_TYPES and filters.type not in {t.value for t in ContentType}:
            errors["type"] = "Type must be 'project', 'video' or 'all'"
        if errors:
            raise ValidationError("Invalid gallery query", details={"fields": errors})

    @staticmethod
    def _matches(item: GalleryViewItem, filters: GalleryFilters) -> bool:
        term = (filters.search_term or "").strip().lower()
        if term and term not in item.title.lower() and term not in (item.description or "").lower():
            return False
        if filters.type != ALL_TYPES and item.type.value != filters.type:
            return False
        if filters.category and filters.category != ALL_CATEGORIES and item.category != filters.category:
            return False
        return True


# ═══════════════════════════════════════════════════════════════════════════════
# BACKGROUND CACHE REFRESH
# ═══════════════════════════════════════════════════════════════════════════════


async def persist_metadata_cache(
    refreshed: list[tuple[UUID, VideoMetadata]],
    session_factory: Callable[[], AsyncSession],
) -> None:
    """
    Write live metadata back to the video rows.

    Runs after the response has been sent, so failures are logged and
    the stale cache simply stays until the next gallery read.
    """
    if not refreshed:
        return

    async with session_factory() as session:
        repo = VideoRepository(session)
        try:
            for video_id, metadata in refreshed:
                await repo.refresh_metadata_cache(video_id, **metadata.cache_fields())
            await repo.commit()
        except AcrossMediaException as e:
            logger.warning("Video metadata cache refresh failed", error=e.message)
            return

    logger.info("Video metadata cache refreshed", count=len(refreshed))
