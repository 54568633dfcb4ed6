"""
Dashboard Service

Headline counts for the admin panel.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from acrossmedia.shared.models.enums import AccountRole
from acrossmedia.shared.repositories.account_repository import AccountRepository
from acrossmedia.shared.repositories.contact_repository import ContactSubmissionRepository
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)


@dataclass
class DashboardStats:
    accounts_by_role: dict[str, int]
    total_accounts: int
    pending_approvals: int
    projects: int
    videos: int
    contact_submissions: int


class DashboardService:
    def __init__(self, session: AsyncSession) -> None:
        self.accounts = AccountRepository(session)
        self.projects = ProjectRepository(session)
        self.videos = VideoRepository(session)
        self.submissions = ContactSubmissionRepository(session)

    async def get_stats(self) -> DashboardStats:
        by_role = await self.accounts.count_by_role()
        return DashboardStats(
            accounts_by_role={role.value: total for role, total in by_role.items()},
            total_accounts=sum(by_role.values()),
            pending_approvals=by_role[AccountRole.PENDING],
            projects=await self.projects.count(),
            videos=await self.videos.count(),
            contact_submissions=await self.submissions.count(),
        )
