"""
YouTube Handler

    GET /api/youtube/video/{video_id}   → live metadata for one video id

Unlike the gallery, this route surfaces provider failures: 404 when the
video is unknown or the lookup timed out, 503 when YouTube is
unreachable or no API key is configured.
"""

from fastapi import APIRouter, Depends, Path

from acrossmedia.api.dependencies.services import get_youtube_adapter
from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter
from acrossmedia.shared.schemas.gallery import VideoMetadataResponse
from acrossmedia.shared.utils.formatting import format_views


router = APIRouter()


@router.get("/video/{video_id}", response_model=VideoMetadataResponse)
async def get_video_metadata(
    video_id: str = Path(pattern=r"^[A-Za-z0-9_-]{11}$"),
    youtube: YouTubeAdapter = Depends(get_youtube_adapter),
):
    metadata = await youtube.fetch_by_id(video_id)
    return VideoMetadataResponse(
        video_id=metadata.video_id,
        title=metadata.title,
        description=metadata.description,
        thumbnail_url=metadata.thumbnail_url,
        duration=metadata.duration,
        views=metadata.views,
        views_display=format_views(metadata.views),
        published_at=metadata.published_at,
        channel_title=metadata.channel_title,
    )
