# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- accounts: Admin portal identities with role/status lifecycle
- projects: Portfolio projects
- videos: External videos with cached provider metadata
- contact_submissions: Contact form messages

Enums created:
- account_role: pending, user, admin, superadmin
- account_status: active, inactive, suspended
- content_status: draft, published, active, inactive
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
account_role_enum = postgresql.ENUM(
    "pending",
    "user",
    "admin",
    "superadmin",
    name="account_role",
    create_type=False,
)

account_status_enum = postgresql.ENUM(
    "active",
    "inactive",
    "suspended",
    name="account_status",
    create_type=False,
)

content_status_enum = postgresql.ENUM(
    "draft",
    "published",
    "active",
    "inactive",
    name="content_status",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _content_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("keywords", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("status", content_status_enum, nullable=False),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    account_role_enum.create(op.get_bind(), checkfirst=True)
    account_status_enum.create(op.get_bind(), checkfirst=True)
    content_status_enum.create(op.get_bind(), checkfirst=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # ACCOUNTS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "accounts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", account_role_enum, nullable=False),
        sa.Column("status", account_status_enum, nullable=False),
        sa.Column("approval_token", sa.String(length=128), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_approval_token", "accounts", ["approval_token"], unique=True)
    op.create_index("ix_accounts_role", "accounts", ["role"])

    # ═══════════════════════════════════════════════════════════════════════════
    # PROJECTS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "projects",
        *_content_columns(),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("client", sa.String(length=200), nullable=True),
        sa.Column("gallery_images", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_category", "projects", ["category"])
    op.create_index("ix_projects_status", "projects", ["status"])

    # ═══════════════════════════════════════════════════════════════════════════
    # VIDEOS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "videos",
        *_content_columns(),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("duration", sa.String(length=20), nullable=True),
        sa.Column("views", sa.String(length=32), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("channel_title", sa.String(length=200), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_videos_category", "videos", ["category"])
    op.create_index("ix_videos_status", "videos", ["status"])

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTACT SUBMISSIONS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table("contact_submissions")
    op.drop_table("videos")
    op.drop_table("projects")
    op.drop_table("accounts")

    op.execute("DROP TYPE IF EXISTS content_status")
    op.execute("DROP TYPE IF EXISTS account_status")
    op.execute("DROP TYPE IF EXISTS account_role")
