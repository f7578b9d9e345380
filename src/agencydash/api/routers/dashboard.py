"""Dashboard endpoints."""
from fastapi import APIRouter, Depends, Query
from agencydash.api.deps import get_store
from agencydash.api.schemas.dashboard import DashboardStats, RecentActivityList
from agencydash.infra.store.base import RemoteStore
from agencydash.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(store: RemoteStore = Depends(get_store)) -> DashboardStats:
    return await DashboardService(store).get_statistics()


@router.get("/recent-activities", response_model=RecentActivityList)
async def get_recent_activities(
    limit: int = Query(5, ge=1, le=100), store: RemoteStore = Depends(get_store),
) -> RecentActivityList:
    items = await DashboardService(store).get_recent_activities(limit)
    return RecentActivityList(items=items, total=len(items))
