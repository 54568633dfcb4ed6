"""
Authentication Dependencies

FastAPI dependencies for admin authentication and authorization.

Dependency Hierarchy:
=====================
    get_token_payload()     ← Extract and validate JWT from header
           │
           ▼
    get_current_account()   ← Load the account; must still be approved and active
           │
           ▼
    require_admin()         ← Role must be admin or superadmin

The role is read from the database on every request, not from the
token, so a demotion takes effect immediately.

Type Aliases:
=============
    CurrentAccount  - Any approved, active account
    AdminAccount    - Admin or superadmin account

Usage:
======
    @router.get("/me")
    async def get_me(account: CurrentAccount):
        return account
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.api.dependencies.database import get_db
from acrossmedia.config.settings import Settings, get_settings
from acrossmedia.shared.core.exceptions import AuthenticationError, ForbiddenError
from acrossmedia.shared.core.logging import log_context
from acrossmedia.shared.models.account import Account
from acrossmedia.shared.models.enums import AccountStatus
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.utils.security import SecurityUtils


# Security scheme for Bearer tokens; missing headers are reported by us
security = HTTPBearer(auto_error=False)


async def get_token_payload(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_account(
    payload: Annotated[dict, Depends(get_token_payload)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Account:
    """
    Load the account named by the token.

    Raises:
        AuthenticationError: Bad payload, account gone, or still pending
        ForbiddenError: Account is inactive or suspended
    """
    try:
        account_id = UUID(str(payload.get("account_id", "")))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    account = await AccountRepository(db).find_by_id(account_id)
    if account is None or account.is_pending:
        raise AuthenticationError("Account no longer exists or is not approved")
    if account.status != AccountStatus.ACTIVE:
        raise ForbiddenError(f"Account is {account.status.value}")

    log_context(account_id=str(account.id))
    return account


async def require_admin(
    account: Annotated[Account, Depends(get_current_account)],
) -> Account:
    """
    Raises:
        ForbiddenError: Account is not an admin or superadmin
    """
    if not account.is_admin:
        raise ForbiddenError("Admin access required")
    return account


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentAccount = Annotated[Account, Depends(get_current_account)]
AdminAccount = Annotated[Account, Depends(require_admin)]
