"""
User Management Handler

Admin-only account listing and lifecycle edits.

    GET    /api/users                → search/filter/paginate
    GET    /api/users/{id}
    PATCH  /api/users/{id}/role      → user ⇄ admin
    PATCH  /api/users/{id}/status    → active / inactive / suspended
    DELETE /api/users/{id}           → permanent (also rejects pending)

Superadmin targets are refused by the workflow with 403.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from acrossmedia.api.dependencies import AdminAccount
from acrossmedia.api.dependencies.services import get_approval_workflow
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.enums import AccountRole, AccountStatus
from acrossmedia.shared.schemas.account import (
    AccountResponse,
    RoleChangeRequest,
    StatusChangeRequest,
)
from acrossmedia.shared.schemas.common import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from acrossmedia.shared.services.approval_service import ApprovalWorkflow


router = APIRouter()
logger = get_logger("handlers.users")


@router.get("", response_model=PaginatedResponse[AccountResponse])
async def list_users(
    admin: AdminAccount,
    pagination: PaginationParams = Depends(),
    search: Optional[str] = Query(None, max_length=100, description="Username or email contains"),
    role: Optional[AccountRole] = Query(None),
    status: Optional[AccountStatus] = Query(None),
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    accounts, total = await workflow.list_accounts(
        search_term=search,
        role=role,
        status=status,
        page=pagination.page,
        page_size=pagination.per_page,
    )
    return PaginatedResponse[AccountResponse](
        data=[AccountResponse.model_validate(account) for account in accounts],
        pagination=PaginationMeta.create(pagination.page, pagination.per_page, total),
    )


@router.get("/{account_id}", response_model=AccountResponse)
async def get_user(
    account_id: UUID,
    admin: AdminAccount,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    return AccountResponse.model_validate(await workflow.get_account(account_id))


@router.patch("/{account_id}/role", response_model=AccountResponse)
async def change_role(
    account_id: UUID,
    data: RoleChangeRequest,
    admin: AdminAccount,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    """
    Raises:
        403: Target or requested role is superadmin/pending
        404: Unknown account
    """
    account = await workflow.change_role(account_id, data.role)
    logger.info("Role change by admin", admin_id=str(admin.id), account_id=str(account_id))
    return AccountResponse.model_validate(account)


@router.patch("/{account_id}/status", response_model=AccountResponse)
async def change_status(
    account_id: UUID,
    data: StatusChangeRequest,
    admin: AdminAccount,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    """
    Raises:
        403: Target is superadmin or pending
        404: Unknown account
    """
    account = await workflow.change_status(account_id, data.status)
    logger.info("Status change by admin", admin_id=str(admin.id), account_id=str(account_id))
    return AccountResponse.model_validate(account)


@router.delete("/{account_id}", response_model=MessageResponse)
async def delete_user(
    account_id: UUID,
    admin: AdminAccount,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    """
    Raises:
        403: Target is superadmin
        404: Unknown account
    """
    await workflow.delete(account_id)
    logger.info("Account deleted by admin", admin_id=str(admin.id), account_id=str(account_id))
    return MessageResponse(message="Account deleted")
