"""
Content Service

Administrative CRUD for projects and videos.

Visibility:
===========
    Project  shown publicly when status ∈ {published, active}
    Video    shown publicly when status = active

Public listings pass visible_only=True; the admin panel sees everything.

Video Metadata Prefill:
=======================
Creating a video (or changing its URL) validates the URL shape and then
asks YouTube for metadata to seed the cache columns. The lookup is best
effort: if it fails the video is stored without a cache and the gallery
fills it in later.

Usage:
======
    service = ContentService(db, youtube=adapter)
    page = await service.list_videos(page=1, page_size=20, visible_only=True)
    video = await service.create_video(title="Launch Film", url="https://youtu.be/...", ...)
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter, extract_video_id
from acrossmedia.shared.core.exceptions import (
    ContentNotFoundError,
    ExternalServiceError,
    VideoNotFoundError,
)
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.content import Project, Video
from acrossmedia.shared.models.enums import (
    VISIBLE_PROJECT_STATUSES,
    VISIBLE_VIDEO_STATUSES,
    ContentStatus,
    ContentType,
)
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)

logger = get_logger("content")

ItemType = TypeVar("ItemType", Project, Video)


@dataclass
class PaginatedContent(Generic[ItemType]):
    """One page of projects or videos."""

    items: list[ItemType]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1


class ContentService:
    """
    Service for project and video administration.

    Attributes:
        project_repo: ProjectRepository
        video_repo: VideoRepository
        youtube: Adapter used to prefill video metadata
    """

    def __init__(self, session: AsyncSession, *, youtube: YouTubeAdapter) -> None:
        self.session = session
        self.project_repo = ProjectRepository(session)
        self.video_repo = VideoRepository(session)
        self.youtube = youtube

    # ═══════════════════════════════════════════════════════════════════════════
    # PROJECTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_projects(
        self,
        *,
        page: int = 1,
        page_size: int = 20,
        status: Optional[ContentStatus] = None,
        visible_only: bool = False,
    ) -> PaginatedContent[Project]:
        if visible_only:
            items = await self.project_repo.list_by_status(VISIBLE_PROJECT_STATUSES)
            return self._paginate(items, page, page_size)

        filters = {"status": status} if status else None
        offset = (page - 1) * page_size
        items = await self.project_repo.list(offset=offset, limit=page_size, filters=filters)
        total = await self.project_repo.count(filters)
        return PaginatedContent(items=items, total=total, page=page, page_size=page_size)

    async def get_project(self, project_id: UUID, *, visible_only: bool = False) -> Project:
        """
        Raises:
            ContentNotFoundError: Unknown id, or hidden when visible_only
        """
        project = await self.project_repo.get(project_id)
        if project is None or (visible_only and project.status not in VISIBLE_PROJECT_STATUSES):
            raise ContentNotFoundError(ContentType.PROJECT.value, str(project_id))
        return project

    async def create_project(self, **fields: Any) -> Project:
        project = await self.project_repo.create(**fields)
        logger.info("Project created", project_id=str(project.id), title=project.title)
        return project

    async def update_project(self, project_id: UUID, **fields: Any) -> Project:
        project = await self.project_repo.update(project_id, **fields)
        if project is None:
            raise ContentNotFoundError(ContentType.PROJECT.value, str(project_id))
        logger.info("Project updated", project_id=str(project_id), fields=sorted(fields))
        return project

    async def delete_project(self, project_id: UUID) -> None:
        if not await self.project_repo.delete(project_id):
            raise ContentNotFoundError(ContentType.PROJECT.value, str(project_id))
        logger.info("Project deleted", project_id=str(project_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # VIDEOS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_videos(
        self,
        *,
        page: int = 1,
        page_size: int = 20,
        status: Optional[ContentStatus] = None,
        visible_only: bool = False,
    ) -> PaginatedContent[Video]:
        if visible_only:
            items = await self.video_repo.list_by_status(VISIBLE_VIDEO_STATUSES)
            return self._paginate(items, page, page_size)

        filters = {"status": status} if status else None
        offset = (page - 1) * page_size
        items = await self.video_repo.list(offset=offset, limit=page_size, filters=filters)
        total = await self.video_repo.count(filters)
        return PaginatedContent(items=items, total=total, page=page, page_size=page_size)

    async def get_video(self, video_id: UUID, *, visible_only: bool = False) -> Video:
        """
        Raises:
            ContentNotFoundError: Unknown id, or hidden when visible_only
        """
        video = await self.video_repo.get(video_id)
        if video is None or (visible_only and video.status not in VISIBLE_VIDEO_STATUSES):
            raise ContentNotFoundError(ContentType.VIDEO.value, str(video_id))
        return video

    async def create_video(self, **fields: Any) -> Video:
        """
        Store a video and prefill its metadata cache when possible.

        Raises:
            InvalidVideoUrlError: URL has no recognizable video id
        """
        extract_video_id(fields["url"])
        cache = await self._prefill_metadata(fields["url"])

        video = await self.video_repo.create(**{**cache, **fields})
        logger.info(
            "Video created",
            video_id=str(video.id),
            url=video.url,
            prefilled=bool(cache),
        )
        return video

    async def update_video(self, video_id: UUID, **fields: Any) -> Video:
        """
        Patch a video; a new URL re-seeds the metadata cache.

        Raises:
            ContentNotFoundError: Unknown id
            InvalidVideoUrlError: New URL has no recognizable video id
        """
        current = await self.get_video(video_id)

        url = fields.get("url")
        if url and url != current.url:
            extract_video_id(url)
            fields = {**await self._prefill_metadata(url), **fields}

        video = await self.video_repo.update(video_id, **fields)
        logger.info("Video updated", video_id=str(video_id), fields=sorted(fields))
        return video

    async def delete_video(self, video_id: UUID) -> None:
        if not await self.video_repo.delete(video_id):
            raise ContentNotFoundError(ContentType.VIDEO.value, str(video_id))
        logger.info("Video deleted", video_id=str(video_id))

    async def _prefill_metadata(self, url: str) -> dict[str, Any]:
        try:
            metadata = await self.youtube.fetch_video_metadata(url)
        except (VideoNotFoundError, ExternalServiceError) as e:
            logger.warning("Video metadata prefill skipped", url=url, error=e.message)
            return {}
        except Exception as e:
            logger.error("Video metadata prefill failed unexpectedly", url=url, error=str(e), exc_info=True)
            return {}
        return metadata.cache_fields()

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _paginate(items: list, page: int, page_size: int) -> PaginatedContent:
        start = (page - 1) * page_size
        return PaginatedContent(
            items=items[start:start + page_size],
            total=len(items),
            page=page,
            page_size=page_size,
        )
