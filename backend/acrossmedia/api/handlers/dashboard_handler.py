"""
Dashboard Handler

    GET /api/admin/dashboard   → account, content and contact counts
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from acrossmedia.api.dependencies import AdminAccount
from acrossmedia.api.dependencies.services import get_dashboard_service
from acrossmedia.shared.schemas.dashboard import DashboardResponse
from acrossmedia.shared.services.dashboard_service import DashboardService


router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    admin: AdminAccount,
    service: DashboardService = Depends(get_dashboard_service),
):
    stats = await service.get_stats()
    return DashboardResponse(**asdict(stats))
