"""Statistics service for the admin dashboard.

Single entry point for every report. Each call runs its queries
concurrently, reduces the results in memory and returns a fresh,
immutable model; nothing is cached between calls.
"""

import time
from collections.abc import Awaitable
from datetime import datetime
from typing import TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.admin.repositories import AnalyticsRepositories
from app.admin.schemas.admin_statistics import (
    Activity,
    BookingsOverview,
    DashboardStats,
    HostelsOverview,
    RevenueOverview,
    UsersOverview,
)
from app.admin.services.statistics.activity_service import ActivityFeedService
from app.admin.services.statistics.base import Period
from app.admin.services.statistics.booking_service import BookingStatisticsService
from app.admin.services.statistics.dashboard_service import DashboardService
from app.admin.services.statistics.hostel_service import HostelStatisticsService
from app.admin.services.statistics.revenue_service import RevenueService
from app.admin.services.statistics.user_service import UserStatisticsService
from app.core.config import settings

logger = structlog.get_logger(__name__)

ReportT = TypeVar("ReportT")


class StatisticsService:
    """Service for calculating and aggregating dashboard statistics."""

    def __init__(self, repositories: AnalyticsRepositories):
        self.repositories = repositories
        self.dashboard = DashboardService(repositories)
        self.users = UserStatisticsService(repositories.users)
        self.bookings = BookingStatisticsService(repositories.bookings)
        self.hostels = HostelStatisticsService(repositories.hostels)
        self.revenue = RevenueService(repositories.payments)
        self.activities = ActivityFeedService(repositories)

    @classmethod
    def from_session_factory(
        cls, session_factory: async_sessionmaker[AsyncSession]
    ) -> "StatisticsService":
        return cls(AnalyticsRepositories.from_session_factory(session_factory))

    async def get_dashboard_stats(self, now: datetime | None = None) -> DashboardStats:
        return await self._report("dashboard_stats", self.dashboard.get_stats(now))

    async def get_users_overview(self, now: datetime | None = None) -> UsersOverview:
        return await self._report("users_overview", self.users.get_overview(now))

    async def get_bookings_overview(self, now: datetime | None = None) -> BookingsOverview:
        return await self._report("bookings_overview", self.bookings.get_overview(now))

    async def get_hostels_overview(self) -> HostelsOverview:
        return await self._report("hostels_overview", self.hostels.get_overview())

    async def get_revenue_overview(
        self, period: Period | str = Period.MONTHLY, now: datetime | None = None
    ) -> RevenueOverview:
        return await self._report("revenue_overview", self.revenue.get_overview(period, now))

    async def get_recent_activities(
        self, limit: int = settings.ACTIVITY_FEED_DEFAULT_LIMIT
    ) -> list[Activity]:
        return await self._report(
            "recent_activities", self.activities.get_recent_activities(limit)
        )

    @staticmethod
    async def _report(name: str, report: Awaitable[ReportT]) -> ReportT:
        start = time.perf_counter()
        result = await report
        logger.info(
            "report_generated",
            report=name,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return result
