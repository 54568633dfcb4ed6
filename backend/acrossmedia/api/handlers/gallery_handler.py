"""
Gallery Handler

    GET /api/gallery   → merged, enriched, filtered page of projects and videos

Live YouTube metadata gathered while building the page is written back
to the video cache after the response is sent (GALLERY_REFRESH_CACHE).
"""

from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from acrossmedia.api.dependencies import SessionFactory
from acrossmedia.api.dependencies.services import get_gallery_service
from acrossmedia.config.settings import Settings, get_settings
from acrossmedia.shared.schemas.gallery import GalleryItemResponse, GalleryResponse
from acrossmedia.shared.services.gallery_service import (
    ALL_CATEGORIES,
    ALL_TYPES,
    GalleryFilters,
    GalleryService,
    persist_metadata_cache,
)


router = APIRouter()


@router.get("", response_model=GalleryResponse)
async def list_gallery_items(
    background_tasks: BackgroundTasks,
    session_factory: SessionFactory,
    search: Optional[str] = Query(None, max_length=200, description="Title or description contains"),
    type: Literal["project", "video", "all"] = Query(ALL_TYPES),
    category: str = Query(ALL_CATEGORIES, max_length=100),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    service: GalleryService = Depends(get_gallery_service),
    settings: Settings = Depends(get_settings),
):
    result = await service.list_gallery_items(
        GalleryFilters(
            search_term=search or "",
            type=type,
            category=category,
            page=page,
            page_size=page_size or settings.GALLERY_DEFAULT_PAGE_SIZE,
        )
    )

    if settings.GALLERY_REFRESH_CACHE and result.refreshed:
        background_tasks.add_task(persist_metadata_cache, result.refreshed, session_factory)

    return GalleryResponse(
        items=[GalleryItemResponse.model_validate(asdict(item)) for item in result.items],
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )
