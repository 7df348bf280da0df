"""API route for the dashboard counters."""

from fastapi import APIRouter, Depends

from billiards_admin.dependencies import get_dashboard_service
from billiards_admin.schemas.dashboard import DashboardStats
from billiards_admin.services.dashboard_service import DashboardService

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStats:
    """Counts of tables, products, employees and today's invoices."""

    return await service.get_stats()


__all__ = ["router"]
