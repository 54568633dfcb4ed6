"""
Authentication Service

Admin portal login and access token issuance.

Login Rules:
============
    unknown account / wrong password  → AuthenticationError (same message)
    PENDING account                   → AuthenticationError (awaiting approval)
    status other than ACTIVE          → ForbiddenError

Any approved account with an ACTIVE status can log in; the admin API
itself additionally requires an admin or superadmin role.

Usage:
======
    service = AuthService(db, settings=settings)
    account, token, expires_in = await service.login("alice", "s3cret-pass")
"""

from datetime import timedelta
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.config.settings import Settings
from acrossmedia.shared.core.exceptions import AuthenticationError, ForbiddenError
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.account import Account
from acrossmedia.shared.models.enums import AccountStatus
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.utils.security import SecurityUtils

logger = get_logger("auth")


class AuthService:
    """
    Service for admin authentication.

    Attributes:
        session: Database session
        repo: AccountRepository instance
        settings: Application settings (JWT configuration)
    """

    def __init__(self, session: AsyncSession, *, settings: Settings) -> None:
        self.session = session
        self.repo = AccountRepository(session)
        self.settings = settings

    async def login(self, identifier: str, password: str) -> Tuple[Account, str, int]:
        """
        Authenticate by username or email and issue a JWT.

        Args:
            identifier: Username or email address
            password: Plain text password

        Returns:
            Tuple of (account, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: Bad credentials or account still pending
            ForbiddenError: Account is inactive or suspended
        """
        account = await self.repo.get_by_login(identifier.strip())
        if not account or not SecurityUtils.verify_password(password, account.password_hash):
            logger.info("Login rejected", identifier=identifier)
            raise AuthenticationError("Invalid username or password")

        if account.is_pending:
            raise AuthenticationError("Account is awaiting approval")

        if account.status != AccountStatus.ACTIVE:
            raise ForbiddenError(f"Account is {account.status.value}")

        access_token = SecurityUtils.create_access_token(
            data={"account_id": str(account.id), "role": account.role.value},
            secret_key=self.settings.SECRET_KEY,
            expires_delta=timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=self.settings.JWT_ALGORITHM,
        )
        expires_in = self.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

        logger.info("Login succeeded", account_id=str(account.id), role=account.role.value)
        return account, access_token, expires_in
