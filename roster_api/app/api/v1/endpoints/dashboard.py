"""
Dashboard endpoints for API v1.

Read-only views combining team and player data for the dashboard
screen.
"""

from fastapi import APIRouter, Depends

from roster_api.app.api.deps import get_dashboard_service
from roster_api.app.schemas.statistics import DashboardData, DashboardStats
from roster_api.app.services.dashboard_service import DashboardService


router = APIRouter()


@router.get("/", response_model=DashboardData)
def dashboard(service: DashboardService = Depends(get_dashboard_service)) -> DashboardData:
    """Full dashboard: quick stats, both statistics blocks, top players and free agents."""
    return service.dashboard()


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(service: DashboardService = Depends(get_dashboard_service)) -> DashboardStats:
    return service.quick_stats()
