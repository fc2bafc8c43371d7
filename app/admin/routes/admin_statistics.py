"""Statistics routes for the admin dashboard.

Authentication is enforced by the application mounting this router.
"""

from fastapi import APIRouter, Depends, Query

from app.admin.dependencies import get_statistics_service
from app.admin.schemas.admin_statistics import (
    Activity,
    BookingsOverview,
    DashboardStats,
    HostelsOverview,
    RevenueOverview,
    UsersOverview,
)
from app.admin.services.statistics_service import StatisticsService
from app.core.config import settings

router = APIRouter(prefix="/dashboard", tags=["admin-statistics"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    service: StatisticsService = Depends(get_statistics_service),
) -> DashboardStats:
    """
    Get dashboard statistics.

    Returns:
    - Users (total, verified since yesterday)
    - Hostels (total, verified)
    - Bookings (total, checked in)
    - Revenue this month
    - Month-over-month growth for users, bookings and revenue
    """
    return await service.get_dashboard_stats()


@router.get("/recent-activities", response_model=list[Activity])
async def get_recent_activities(
    limit: int = Query(
        settings.ACTIVITY_FEED_DEFAULT_LIMIT,
        ge=1,
        le=settings.ACTIVITY_FEED_MAX_LIMIT,
        description="Maximum number of activities",
    ),
    service: StatisticsService = Depends(get_statistics_service),
) -> list[Activity]:
    """
    Get the merged feed of recent user, booking and payment activity.

    At most 15 items are available: 5 per source.
    """
    return await service.get_recent_activities(limit)


@router.get("/users/overview", response_model=UsersOverview)
async def get_users_overview(
    service: StatisticsService = Depends(get_statistics_service),
) -> UsersOverview:
    return await service.get_users_overview()


@router.get("/bookings/overview", response_model=BookingsOverview)
async def get_bookings_overview(
    service: StatisticsService = Depends(get_statistics_service),
) -> BookingsOverview:
    return await service.get_bookings_overview()


@router.get("/hostels/overview", response_model=HostelsOverview)
async def get_hostels_overview(
    service: StatisticsService = Depends(get_statistics_service),
) -> HostelsOverview:
    return await service.get_hostels_overview()


@router.get("/revenue/overview", response_model=RevenueOverview)
async def get_revenue_overview(
    period: str = Query("monthly", description="daily, weekly or monthly"),
    service: StatisticsService = Depends(get_statistics_service),
) -> RevenueOverview:
    """
    Get revenue for the current period compared with the previous one.

    - daily: today so far vs yesterday
    - weekly: last 7 days vs the 7 days before
    - monthly: this month so far vs the whole previous month
    """
    return await service.get_revenue_overview(period)
