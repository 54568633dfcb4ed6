"""
Approval Workflow Service

Account lifecycle for the admin portal.

State Machine:
==============
    register ──► PENDING ──approve(token)──► USER (status ACTIVE)
                    │                          ▲   │
                    │ delete (reject)          │   ▼ change_role
                    ▼                         ADMIN
                 (removed)
                                 change_status: ACTIVE / INACTIVE / SUSPENDED
                                 delete: permanent

    SUPERADMIN is terminal and protected: no role change, no status
    change, no delete. It is never reachable through this workflow.

Ordering:
=========
Notifications go out only after the state change is committed.
Delivery failures are logged by the dispatcher and never fail the
operation. Approvers are read once per registration, so an admin added
afterwards does not receive that registration's email.

Usage:
======
    workflow = ApprovalWorkflow(session, settings=settings, dispatcher=dispatcher)
    account = await workflow.register("alice", "alice@example.com", "s3cret-pass")
    account = await workflow.approve(token)
"""

import re
from typing import Optional, Tuple, Union
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.config.settings import Settings
from acrossmedia.shared.core.exceptions import (
    AccountNotFoundError,
    ApprovalTokenNotFoundError,
    ForbiddenError,
    ValidationError,
)
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.account import Account
from acrossmedia.shared.models.enums import ADMIN_ROLES, AccountRole, AccountStatus
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.services.notification_service import (
    NotificationDispatcher,
    NotificationTemplate,
)
from acrossmedia.shared.utils.security import SecurityUtils

logger = get_logger("approval")

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,30}$")
PASSWORD_MIN_LENGTH = 8


class ApprovalWorkflow:
    """
    Service for the registration → approval → role lifecycle.

    Attributes:
        session: Database session
        repo: AccountRepository
        settings: Application settings (link construction)
        dispatcher: NotificationDispatcher for best-effort email
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        settings: Settings,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.session = session
        self.repo = AccountRepository(session)
        self.settings = settings
        self.dispatcher = dispatcher

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _validate_registration(username: str, email: str, password: str) -> dict[str, str]:
        """Return a field → message map of format problems."""
        errors: dict[str, str] = {}

        if not USERNAME_PATTERN.match(username):
            errors["username"] = (
                "Username must be 3-30 characters of letters, digits, '.', '_' or '-'"
            )

        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            errors["email"] = "Please provide a valid email address"

        if len(password) < PASSWORD_MIN_LENGTH:
            errors["password"] = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"

        return errors

    async def register(self, username: str, email: str, password: str) -> Account:
        """
        Register a pending account and ask every admin to approve it.

        Args:
            username: Desired username
            email: Email address (stored lower-cased)
            password: Plain text password (hashed before storage)

        Returns:
            The created pending account

        Raises:
            ValidationError: Bad format or username/email already in use;
                details["fields"] maps each failing field to a message
            StorageError: Persistence failure
        """
        username = username.strip()
        email = email.strip().lower()

        errors = self._validate_registration(username, email, password)
        if errors:
            raise ValidationError("Registration failed", details={"fields": errors})

        errors = await self._taken_fields(username, email)
        if errors:
            raise ValidationError("Registration failed", details={"fields": errors})

        try:
            account = await self.repo.create(
                username=username,
                email=email,
                password_hash=SecurityUtils.hash_password(password),
                role=AccountRole.PENDING,
                status=AccountStatus.ACTIVE,
                approval_token=SecurityUtils.generate_approval_token(),
                approved_at=None,
            )
            await self.repo.commit()
        except ValidationError as e:
            # A concurrent registration claimed the username or email first
            await self.session.rollback()
            raise ValidationError(
                "Registration failed",
                details={"fields": await self._taken_fields(username, email) or {
                    "username": "Username or email is already registered",
                }},
            ) from e

        logger.info("Account registered", account_id=str(account.id), username=username)

        approvers = await self.repo.find_by_role_in(sorted(ADMIN_ROLES))
        await self.dispatcher.send_many(
            [approver.email for approver in approvers],
            NotificationTemplate.APPROVAL_REQUEST,
            {
                "username": account.username,
                "email": account.email,
                "registered_at": account.created_at.isoformat(),
                "approval_link": self.approval_link(account.approval_token),
            },
        )
        return account

    async def _taken_fields(self, username: str, email: str) -> dict[str, str]:
        """Field → message map for a username or email already in use."""
        errors: dict[str, str] = {}
        if await self.repo.get_by_username(username):
            errors["username"] = "Username is already taken"
        if await self.repo.get_by_email(email):
            errors["email"] = "Email is already registered"
        return errors

    def approval_link(self, token: str) -> str:
        return f"{self.settings.BACKEND_URL.rstrip('/')}/api/auth/approve/{token}"

    # ═══════════════════════════════════════════════════════════════════════════
    # APPROVAL
    # ═══════════════════════════════════════════════════════════════════════════

    async def approve(self, token: str) -> Account:
        """
        Consume an approval token and promote its account to USER.

        Lookup and token clearing happen in one conditional UPDATE, so
        concurrent approvals of the same token succeed at most once.

        Raises:
            ApprovalTokenNotFoundError: Token unknown, consumed, or never issued
            StorageError: Persistence failure
        """
        account = await self.repo.consume_approval_token(token) if token else None
        if account is None:
            logger.info("Approval token rejected")
            raise ApprovalTokenNotFoundError()

        await self.repo.commit()
        logger.info("Account approved", account_id=str(account.id), username=account.username)

        await self.dispatcher.send(
            account.email,
            NotificationTemplate.APPROVAL_GRANTED,
            {
                "username": account.username,
                "login_link": f"{self.settings.CLIENT_URL.rstrip('/')}/admin/login",
            },
        )
        return account

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMINISTRATIVE EDITS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _get_account(self, account_id: UUID) -> Account:
        account = await self.repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(str(account_id))
        return account

    @staticmethod
    def _ensure_editable(account: Account) -> None:
        """Only USER and ADMIN accounts accept role and status edits."""
        match account.role:
            case AccountRole.USER | AccountRole.ADMIN:
                return
            case AccountRole.SUPERADMIN:
                raise ForbiddenError("Superadmin accounts cannot be modified")
            case AccountRole.PENDING:
                raise ForbiddenError("Pending accounts must be approved first")
            case _:
                raise ForbiddenError("Account role does not allow this operation")

    @staticmethod
    def _coerce(enum_cls, value, field: str):
        try:
            return enum_cls(value)
        except ValueError as e:
            raise ValidationError(
                f"Invalid {field}",
                details={"fields": {field: f"'{value}' is not a valid {field}"}},
            ) from e

    async def change_role(
        self,
        account_id: UUID,
        new_role: Union[AccountRole, str],
    ) -> Account:
        """
        Switch an account between USER and ADMIN.

        Raises:
            AccountNotFoundError: Unknown account
            ValidationError: new_role is not a role at all
            ForbiddenError: Target is superadmin/pending, or new_role is
                superadmin/pending
        """
        role = self._coerce(AccountRole, new_role, "role")
        account = await self._get_account(account_id)
        self._ensure_editable(account)

        match role:
            case AccountRole.USER | AccountRole.ADMIN:
                pass
            case AccountRole.SUPERADMIN:
                raise ForbiddenError("Role escalation to superadmin is not permitted")
            case AccountRole.PENDING:
                raise ForbiddenError("Accounts cannot be returned to pending")
            case _:
                raise ForbiddenError("Role is not assignable")

        account = await self.repo.update(account_id, role=role)
        logger.info("Account role changed", account_id=str(account_id), role=role.value)
        return account

    async def change_status(
        self,
        account_id: UUID,
        new_status: Union[AccountStatus, str],
    ) -> Account:
        """
        Set an account's status to active, inactive or suspended.

        Raises:
            AccountNotFoundError: Unknown account
            ValidationError: new_status is not a status
            ForbiddenError: Target is superadmin or pending
        """
        status = self._coerce(AccountStatus, new_status, "status")
        account = await self._get_account(account_id)
        self._ensure_editable(account)

        match status:
            case AccountStatus.ACTIVE | AccountStatus.INACTIVE | AccountStatus.SUSPENDED:
                pass
            case _:
                raise ForbiddenError("Status is not assignable")

        account = await self.repo.update(account_id, status=status)
        logger.info("Account status changed", account_id=str(account_id), status=status.value)
        return account

    async def delete(self, account_id: UUID) -> None:
        """
        Permanently remove an account (rejects a pending registration too).

        Raises:
            AccountNotFoundError: Unknown account
            ForbiddenError: Target is superadmin
        """
        account = await self._get_account(account_id)
        if account.is_protected:
            raise ForbiddenError("Superadmin accounts cannot be deleted")

        await self.repo.delete(account_id)
        logger.info(
            "Account deleted",
            account_id=str(account_id),
            role=account.role.value,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTING
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_account(self, account_id: UUID) -> Account:
        """
        Raises:
            AccountNotFoundError: Unknown account
        """
        return await self._get_account(account_id)

    async def list_accounts(
        self,
        *,
        search_term: Optional[str] = None,
        role: Optional[AccountRole] = None,
        status: Optional[AccountStatus] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> Tuple[list[Account], int]:
        """
        Admin user listing, newest first.

        Returns:
            Tuple of (accounts on this page, total matching accounts)
        """
        accounts = await self.repo.search(
            search_term=search_term,
            role=role,
            status=status,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        total = await self.repo.count_search(search_term=search_term, role=role, status=status)
        return accounts, total
