"""
Project Handler

    GET    /api/projects          → public, published/active only
    GET    /api/projects/all      → admin, every status
    GET    /api/projects/{id}     → public, published/active only
    POST   /api/projects          → admin
    PUT    /api/projects/{id}     → admin, partial update
    DELETE /api/projects/{id}     → admin
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
from acrossmedia.shared.schemas.content import ProjectCreate, ProjectResponse, ProjectUpdate
from acrossmedia.shared.services.content_service import ContentService, PaginatedContent


router = APIRouter()


def _page_response(page: PaginatedContent) -> PaginatedResponse[ProjectResponse]:
    return PaginatedResponse[ProjectResponse](
        data=[ProjectResponse.model_validate(project) for project in page.items],
        pagination=PaginationMeta.create(page.page, page.page_size, page.total),
    )


@router.get("", response_model=PaginatedResponse[ProjectResponse])
async def list_projects(
    pagination: PaginationParams = Depends(),
    service: ContentService = Depends(get_content_service),
):
    page = await service.list_projects(
        page=pagination.page,
        page_size=pagination.per_page,
        visible_only=True,
    )
    return _page_response(page)


@router.get("/all", response_model=PaginatedResponse[ProjectResponse])
async def list_all_projects(
    admin: AdminAccount,
    pagination: PaginationParams = Depends(),
    status_filter: Optional[ContentStatus] = Query(None, alias="status"),
    service: ContentService = Depends(get_content_service),
):
    page = await service.list_projects(
        page=pagination.page,
        page_size=pagination.per_page,
        status=status_filter,
    )
    return _page_response(page)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    service: ContentService = Depends(get_content_service),
):
    return ProjectResponse.model_validate(
        await service.get_project(project_id, visible_only=True)
    )


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    project = await service.create_project(**data.model_dump())
    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    project = await service.update_project(project_id, **data.model_dump(exclude_unset=True))
    return ProjectResponse.model_validate(project)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: UUID,
    admin: AdminAccount,
    service: ContentService = Depends(get_content_service),
):
    await service.delete_project(project_id)
    return MessageResponse(message="Project deleted")
