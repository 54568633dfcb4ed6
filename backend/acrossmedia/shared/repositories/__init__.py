"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]              ← Generic CRUD + error translation
         │
         ├── AccountRepository             ← Approval tokens, roles, admin search
         ├── ProjectRepository             ← Portfolio projects
         ├── VideoRepository               ← Videos + metadata cache refresh
         └── ContactSubmissionRepository   ← Contact form messages

Usage Example:
==============
    from acrossmedia.shared.repositories import AccountRepository

    repo = AccountRepository(session)
    approvers = await repo.find_by_role_in([AccountRole.ADMIN, AccountRole.SUPERADMIN])
"""

from acrossmedia.shared.repositories.base import BaseRepository
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)
from acrossmedia.shared.repositories.contact_repository import ContactSubmissionRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "ProjectRepository",
    "VideoRepository",
    "ContactSubmissionRepository",
]
