"""User statistics service."""

from datetime import datetime

from app.admin.schemas.admin_statistics import ScalarMetric, UsersOverview
from app.admin.services.statistics.base import Period, compute_windows, gather_queries, in_window
from app.admin.services.statistics.calculations import reduce_counts
from app.auth.models.user import User
from app.core.datetime_utils import ensure_utc, utc_now
from app.core.repository import ReadRepository


class UserStatisticsService:
    """Service for user-related statistics."""

    def __init__(self, users: ReadRepository[User]):
        self.users = users

    async def get_overview(self, now: datetime | None = None) -> UsersOverview:
        """Get users overview.

        Weekly and monthly figures are cumulative since the start of their
        window (last 7 days, first of the month), not deltas between periods.

        Args:
            now: Reference instant, defaults to the current UTC time.

        Returns:
            UsersOverview with totals, month-over-month growth and role breakdown.
        """
        now = ensure_utc(now) if now else utc_now()
        weeks = compute_windows(Period.WEEKLY, now)
        months = compute_windows(Period.MONTHLY, now)

        total, weekly, monthly, previous_month, by_role = await gather_queries(
            self.users.count(),
            self.users.count(in_window(User.verified_at, weeks.current)),
            self.users.count(in_window(User.verified_at, months.current)),
            self.users.count(in_window(User.verified_at, months.previous)),
            self.users.group_count_by("role"),
            report="users_overview",
        )

        return UsersOverview(
            total=total,
            weekly=weekly,
            monthly=monthly,
            growth=ScalarMetric(current=monthly, previous=previous_month).growth_percent,
            by_role=reduce_counts(by_role),
        )
