"""
Dashboard Schemas
"""

from acrossmedia.shared.schemas.common import BaseSchema


class DashboardResponse(BaseSchema):
    accounts_by_role: dict[str, int]
    total_accounts: int
    pending_approvals: int
    projects: int
    videos: int
    contact_submissions: int
