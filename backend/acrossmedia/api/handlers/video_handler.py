"""
Video Handler

    GET    /api/videos          → public, active only
    GET    /api/videos/all      → admin, every status
    GET    /api/videos/{id}     → public, active only
    POST   /api/videos          → admin, metadata prefilled when YouTube answers
    PUT    /api/videos/{id}     → admin, partial update
    DELETE /api/videos/{id}     → admin
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from acrossmedia.api.dependencies import AdminAccount
from acrossmedia.api.dependencies.services import get_content_service
from acrossmedia.shared.models.enums import ContentStatus
from acrossmedia.shared.schemas.common import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from acrossmedia.shared.schemas.content import VideoCreate, VideoResponse, VideoUpdate
from acrossmedia.shared.services.content_service import ContentService, PaginatedContent


router = APIRouter()


def _page_response(page: PaginatedContent) -> PaginatedResponse[VideoResponse]:
    return PaginatedResponse[VideoResponse](
        data=[VideoResponse.model_validate(video) for video in page.items],
        pagination=PaginationMeta.create(page.page, page.page_size, page.total),
    )


@router.get("", response_model=PaginatedResponse[VideoResponse])
async def list_videos(
    pagination: PaginationParams = Depends(),
    service: ContentService = Depends(get_content_service),
):
    page = await service.list_videos(
        page=pagination.page,
        page_size=pagination.per_page,
        visible_only=True,
    )
    return _page_response(page)


@router.get("/all", response_model=PaginatedResponse[VideoResponse])
async def list_all_videos(
    admin: AdminAccount,
    pagination: PaginationParams = Depends(),
    status_filter: Optional[ContentStatus] = Query(None, alias="status"),
    service: ContentService = Depends(get_content_service),
):
    page = await service.list_videos(
        page=pagination.page,
        page_size=pagination.per_page,
        status=status_filter,
    )
    return _page_response(page)


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: UUID,
    service: ContentService = Depends(get_content_service),
):
    return VideoResponse.model_validate(await service.get_video(video_id, visible_only=True))


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def create_video(
    data: VideoCreate,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    """
    Raises:
        400: URL is not a recognizable YouTube link
    """
    video = await service.create_video(**data.model_dump())
    return VideoResponse.model_validate(video)


@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(
    video_id: UUID,
    data: VideoUpdate,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    video = await service.update_video(video_id, **data.model_dump(exclude_unset=True))
    return VideoResponse.model_validate(video)


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: UUID,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    await service.delete_video(video_id)
    return MessageResponse(message="Video deleted")
