"""
Authentication Handler

Registration, emailed-link approval and admin login.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service errors
are AcrossMediaException subclasses and are turned into responses by
the global exception handlers.

Endpoints:
==========
    POST /api/auth/register          → pending account + admin emails
    GET  /api/auth/approve/{token}   → one-shot approval link
    POST /api/auth/admin/login       → JWT for approved, active accounts
    GET  /api/auth/admin/me          → current account
"""

from fastapi import APIRouter, Depends, status

from acrossmedia.api.dependencies import CurrentAccount
from acrossmedia.api.dependencies.services import get_approval_workflow, get_auth_service
from acrossmedia.shared.schemas.account import (
    AccountResponse,
    ApprovalResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from acrossmedia.shared.services.approval_service import ApprovalWorkflow
from acrossmedia.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    data: RegisterRequest,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    """
    Register an admin portal account.

    The account starts pending; every admin receives an approval link.

    Raises:
        400: Field-level validation failure or username/email taken
    """
    account = await workflow.register(data.username, data.email, data.password)
    return RegisterResponse(
        message="Registration successful. Your account is awaiting approval.",
        account=AccountResponse.model_validate(account),
    )


@router.get("/approve/{token}", response_model=ApprovalResponse)
async def approve(
    token: str,
    workflow: ApprovalWorkflow = Depends(get_approval_workflow),
):
    """
    Approve the pending account holding this token.

    Raises:
        404: Token invalid or already used
    """
    account = await workflow.approve(token)
    return ApprovalResponse(
        message=f"Account '{account.username}' has been approved.",
        account=AccountResponse.model_validate(account),
    )


@router.post("/admin/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate by username or email and return a JWT.

    Raises:
        401: Invalid credentials or account awaiting approval
        403: Account inactive or suspended
    """
    account, access_token, expires_in = await auth_service.login(
        credentials.identifier,
        credentials.password,
    )
    return AuthResponse(
        account=AccountResponse.model_validate(account),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.get("/admin/me", response_model=AccountResponse)
async def me(account: CurrentAccount):
    return AccountResponse.model_validate(account)
