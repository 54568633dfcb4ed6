"""
YouTube adapter - YouTube Data API v3 client.

Provides:
- Video id extraction from watch, short, shorts and embed URLs
- Single-video metadata lookup (title, description, thumbnail,
  duration, raw view count, publish date, channel title)

Failure contract:
=================
    malformed URL            → InvalidVideoUrlError
    non-2xx response         → VideoNotFoundError
    empty result set         → VideoNotFoundError
    malformed body           → VideoNotFoundError
    timeout                  → VideoNotFoundError
    transport error / no key → ExternalServiceError

No retries happen here. Callers decide: the gallery falls back to the
stored record, the public /api/youtube route surfaces the error.
"""

from dataclasses import dataclass
from datetime import datetime
import re
from typing import Any, Optional

import httpx

from acrossmedia.config.settings import Settings
from acrossmedia.shared.core.exceptions import (
    ExternalServiceError,
    InvalidVideoUrlError,
    VideoNotFoundError,
)
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.utils.formatting import format_duration

logger = get_logger("youtube")

SERVICE_NAME = "YouTube"

# Video ids are 11 characters of [A-Za-z0-9_-]
_VIDEO_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?(?:[^#]*&)?v=)([A-Za-z0-9_-]{11})"),
    re.compile(r"(?:youtu\.be/)([A-Za-z0-9_-]{11})"),
    re.compile(r"(?:youtube\.com/shorts/)([A-Za-z0-9_-]{11})"),
    re.compile(r"(?:youtube\.com/embed/)([A-Za-z0-9_-]{11})"),
)


@dataclass
class VideoMetadata:
    """Live metadata for one video."""

    video_id: str
    title: str
    description: str
    thumbnail_url: Optional[str]
    duration: str
    views: str
    published_at: Optional[datetime]
    channel_title: Optional[str]

    def cache_fields(self) -> dict[str, Any]:
        """Fields that are written back to the stored video cache."""
        return {
            "thumbnail_url": self.thumbnail_url,
            "duration": self.duration,
            "views": self.views,
            "published_at": self.published_at,
            "channel_title": self.channel_title,
        }


def extract_video_id(url: str) -> str:
    """
    Extract the platform video id from a source URL.

    Accepted shapes:
        https://www.youtube.com/watch?v=<id>
        https://youtu.be/<id>
        https://youtube.com/shorts/<id>?si=...
        https://www.youtube.com/embed/<id>

    Raises:
        InvalidVideoUrlError: If no id can be extracted
    """
    if url:
        for pattern in _VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
    raise InvalidVideoUrlError(url)


def _parse_published_at(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class YouTubeAdapter:
    """
    Adapter for YouTube Data API operations.

    Attributes:
        api_key: Service credential
        api_url: videos endpoint
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = settings.YOUTUBE_API_KEY
        self.api_url = settings.YOUTUBE_API_URL
        self.timeout = settings.YOUTUBE_TIMEOUT_SECONDS
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-loaded HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_video_metadata(self, source_url: str) -> VideoMetadata:
        """
        Fetch live metadata for the video behind a source URL.

        Raises:
            InvalidVideoUrlError: If the URL has no recognizable video id
            VideoNotFoundError: Non-2xx, empty result, or timeout
            ExternalServiceError: Missing API key or transport failure
        """
        video_id = extract_video_id(source_url)
        return await self.fetch_by_id(video_id)

    async def fetch_by_id(self, video_id: str) -> VideoMetadata:
        """Fetch live metadata for a known video id."""
        if not self.api_key:
            raise ExternalServiceError(SERVICE_NAME, "YouTube API key not configured")

        params = {
            "part": "snippet,statistics,contentDetails",
            "id": video_id,
            "key": self.api_key,
        }

        try:
            response = await self.client.get(self.api_url, params=params)
        except httpx.TimeoutException as e:
            logger.warning("YouTube request timed out", video_id=video_id)
            raise VideoNotFoundError(video_id, reason="timeout") from e
        except httpx.HTTPError as e:
            logger.error("YouTube request failed", video_id=video_id, error=str(e))
            raise ExternalServiceError(SERVICE_NAME, details={"video_id": video_id}) from e

        if not response.is_success:
            logger.warning(
                "YouTube API error",
                video_id=video_id,
                status_code=response.status_code,
            )
            raise VideoNotFoundError(video_id, reason=f"HTTP {response.status_code}")

        try:
            body = response.json()
            if not isinstance(body, dict):
                raise TypeError(f"expected an object, got {type(body).__name__}")
            items = body.get("items") or []
            if not items:
                raise VideoNotFoundError(video_id, reason="no results")
            return self._to_metadata(video_id, items[0])
        except (ValueError, AttributeError, KeyError, TypeError) as e:
            logger.warning("YouTube response malformed", video_id=video_id, error=str(e))
            raise VideoNotFoundError(video_id, reason="malformed response") from e

    @staticmethod
    def _to_metadata(video_id: str, item: dict[str, Any]) -> VideoMetadata:
        snippet = item.get("snippet", {})
        statistics = item.get("statistics", {})
        content_details = item.get("contentDetails", {})
        thumbnails = snippet.get("thumbnails", {})

        thumbnail = (thumbnails.get("high") or thumbnails.get("default") or {}).get("url")

        return VideoMetadata(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail_url=thumbnail,
            duration=format_duration(content_details.get("duration")),
            views=str(statistics.get("viewCount") or "0"),
            published_at=_parse_published_at(snippet.get("publishedAt")),
            channel_title=snippet.get("channelTitle"),
        )
