"""
Account Repository

Database operations specific to the Account model.

Common Operations:
==================
- find_by_token()           → Pending account holding an approval token
- find_by_role_in()         → Approvers (admins and superadmins)
- get_by_username/email()   → Uniqueness checks and login lookup
- consume_approval_token()  → Atomic pending → user transition
- search()/count_search()   → Admin user listing

Atomic Approval:
================
consume_approval_token() is a single conditional UPDATE:

    UPDATE accounts
       SET role = 'user', status = 'active',
           approved_at = :now, approval_token = NULL
     WHERE approval_token = :token AND role = 'pending'
    RETURNING *

Two concurrent approvals of the same token cannot both match the WHERE
clause, so at most one caller gets the account back.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from acrossmedia.shared.models.account import Account
from acrossmedia.shared.models.enums import AccountRole, AccountStatus
from acrossmedia.shared.models.base import utcnow
from acrossmedia.shared.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for Account database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Account, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        return await self.get(account_id)

    async def find_by_token(self, token: str) -> Optional[Account]:
        """Get the pending account that holds this approval token."""
        result = await self._execute(select(Account).where(Account.approval_token == token))
        return result.scalar_one_or_none()

    async def find_by_role_in(self, roles: Sequence[AccountRole]) -> list[Account]:
        """Get every account whose role is one of the given roles."""
        result = await self._execute(
            select(Account).where(Account.role.in_(list(roles))).order_by(Account.created_at)
        )
        return list(result.scalars().all())

    async def get_by_username(self, username: str) -> Optional[Account]:
        result = await self._execute(select(Account).where(Account.username == username))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """
        Get account by email address.

        Emails are stored lower-cased, so the lookup is case-insensitive.
        """
        result = await self._execute(select(Account).where(Account.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_login(self, identifier: str) -> Optional[Account]:
        """Get account by username or email."""
        result = await self._execute(
            select(Account).where(
                or_(Account.username == identifier, Account.email == identifier.lower())
            )
        )
        return result.scalars().first()

    # ═══════════════════════════════════════════════════════════════════════════
    # APPROVAL
    # ═══════════════════════════════════════════════════════════════════════════

    async def consume_approval_token(
        self,
        token: str,
        approved_at: Optional[datetime] = None,
    ) -> Optional[Account]:
        """
        Atomically promote the pending account holding this token.

        Sets role=user, status=active, approved_at, and clears the token
        in one conditional UPDATE.

        Args:
            token: Approval token from the emailed link
            approved_at: Transition time (defaults to now)

        Returns:
            The approved account, or None when no pending account holds
            the token (invalid, already consumed, or never issued)
        """
        statement = (
            update(Account)
            .where(
                Account.approval_token == token,
                Account.role == AccountRole.PENDING,
            )
            .values(
                role=AccountRole.USER,
                status=AccountStatus.ACTIVE,
                approved_at=approved_at or utcnow(),
                approval_token=None,
                updated_at=utcnow(),
            )
            .returning(Account)
            # Identity map may hold a stale pending copy of this row
            .execution_options(populate_existing=True)
        )
        result = await self._execute(statement)
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMIN LISTING
    # ═══════════════════════════════════════════════════════════════════════════

    def _search_query(
        self,
        query: Select,
        search_term: Optional[str],
        role: Optional[AccountRole],
        status: Optional[AccountStatus],
    ) -> Select:
        if search_term:
            pattern = f"%{search_term.lower()}%"
            query = query.where(
                or_(
                    func.lower(Account.username).like(pattern),
                    Account.email.like(pattern),
                )
            )
        if role is not None:
            query = query.where(Account.role == role)
        if status is not None:
            query = query.where(Account.status == status)
        return query

    async def search(
        self,
        *,
        search_term: Optional[str] = None,
        role: Optional[AccountRole] = None,
        status: Optional[AccountStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Account]:
        """List accounts matching the admin filters, newest first."""
        query = self._search_query(select(Account), search_term, role, status)
        query = query.order_by(Account.created_at.desc()).offset(offset).limit(limit)
        result = await self._execute(query)
        return list(result.scalars().all())

    async def count_search(
        self,
        *,
        search_term: Optional[str] = None,
        role: Optional[AccountRole] = None,
        status: Optional[AccountStatus] = None,
    ) -> int:
        query = self._search_query(select(func.count(Account.id)), search_term, role, status)
        result = await self._execute(query)
        return result.scalar() or 0

    async def count_by_role(self) -> dict[AccountRole, int]:
        """Number of accounts per role (roles with no accounts report 0)."""
        result = await self._execute(
            select(Account.role, func.count(Account.id)).group_by(Account.role)
        )
        counts = {role: 0 for role in AccountRole}
        for role, total in result.all():
            counts[AccountRole(role)] = total
        return counts
