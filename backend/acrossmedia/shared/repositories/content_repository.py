"""
Content Repositories

Database operations for the two content stores.

    ProjectRepository  ← portfolio projects
    VideoRepository    ← external videos and their cached metadata

The gallery reads both through list_by_status(); administrative CRUD
uses the BaseRepository operations.
"""

from typing import Any, Optional, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.models.content import Project, Video
from acrossmedia.shared.models.enums import ContentStatus
from acrossmedia.shared.repositories.base import BaseRepository


ContentModel = TypeVar("ContentModel", Project, Video)


class _ContentRepository(BaseRepository[ContentModel]):
    """Queries shared by both content stores."""

    async def list_by_status(self, statuses: Sequence[ContentStatus]) -> list[ContentModel]:
        """
        Get every item whose status is one of the given statuses.

        Rows come back in insertion-time order (newest first); the gallery
        re-sorts after merging.
        """
        result = await self._execute(
            select(self.model)
            .where(self.model.status.in_(list(statuses)))
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())


class ProjectRepository(_ContentRepository[Project]):
    """Repository for Project database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Project, session)


class VideoRepository(_ContentRepository[Video]):
    """Repository for Video database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Video, session)

    async def refresh_metadata_cache(
        self,
        video_id: UUID,
        **metadata: Any,
    ) -> Optional[Video]:
        """
        Overwrite the cached provider metadata of a video.

        Only the cache columns are accepted; title and description stay
        under administrative control.

        Args:
            video_id: Video UUID
            **metadata: thumbnail_url, duration, views, published_at, channel_title

        Returns:
            Updated video, or None if it no longer exists
        """
        allowed = {"thumbnail_url", "duration", "views", "published_at", "channel_title"}
        patch = {key: value for key, value in metadata.items() if key in allowed}
        return await self.update(video_id, **patch)
