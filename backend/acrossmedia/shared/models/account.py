"""
Account Entity Model

Represents a registered admin-portal identity.

SAMPLE ACCOUNT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ email            │ "alice@example.com"                                       │
│ password_hash    │ "$2b$12$..."                                              │
│ role             │ "pending"                                                 │
│ status           │ "active"                                                  │
│ approval_token   │ "Zx8f...q1" (only while role is pending)                  │
│ approved_at      │ NULL (set once when leaving pending)                      │
│ created_at       │ 2025-03-01T09:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
    register ──► pending ──approve(token)──► user/active ◄──► admin
                                                  │
                                     role/status edits, delete

    superadmin is provisioned out of band and is never touched by the workflow.
"""

from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy import DateTime, Enum as SQLEnum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from acrossmedia.shared.models.base import Base, TimestampMixin
from acrossmedia.shared.models.enums import AccountRole, AccountStatus, ADMIN_ROLES


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Account(Base, TimestampMixin):
    """
    Account model.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Unique login name
        email: Unique email address, stored lower-cased
        password_hash: Bcrypt hash
        role: AccountRole
        status: AccountStatus
        approval_token: Single-use token, non-null iff role is pending
        approved_at: When the account left the pending role
    """

    __tablename__ = "accounts"

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ROLE & STATUS
    # ═══════════════════════════════════════════════════════════════════════════

    role: Mapped[AccountRole] = mapped_column(
        SQLEnum(AccountRole, name="account_role", values_callable=_enum_values),
        nullable=False,
        default=AccountRole.PENDING,
        index=True,
    )

    status: Mapped[AccountStatus] = mapped_column(
        SQLEnum(AccountStatus, name="account_status", values_callable=_enum_values),
        nullable=False,
        default=AccountStatus.ACTIVE,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # APPROVAL
    # ═══════════════════════════════════════════════════════════════════════════

    approval_token: Mapped[Optional[str]] = mapped_column(
        String(128),
        unique=True,
        nullable=True,
        index=True,
    )

    approved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def is_pending(self) -> bool:
        return self.role == AccountRole.PENDING

    @property
    def is_protected(self) -> bool:
        """Superadmin accounts are never modified or deleted."""
        return self.role == AccountRole.SUPERADMIN

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, username={self.username}, role={self.role})>"
