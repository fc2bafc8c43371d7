"""Dashboard statistics service."""

from datetime import datetime, timedelta

from app.admin.repositories import AnalyticsRepositories
from app.admin.schemas.admin_statistics import DashboardStats, ScalarMetric
from app.admin.services.statistics.base import (
    Period,
    compute_windows,
    gather_queries,
    in_window,
    start_of_day,
)
from app.admin.services.statistics.calculations import to_amount
from app.auth.models.user import User
from app.bookings.models.booking import Booking, BookingStatus
from app.core.datetime_utils import ensure_utc, utc_now
from app.hostels.models.hostel import Hostel
from app.payments.models.payment import Payment


class DashboardService:
    """Service for dashboard summary aggregation."""

    def __init__(self, repositories: AnalyticsRepositories):
        self.repositories = repositories

    async def get_stats(self, now: datetime | None = None) -> DashboardStats:
        """Get the dashboard-wide snapshot.

        All counts and sums are fetched concurrently. Growth figures compare
        the month so far with the whole previous calendar month for revenue,
        bookings created and users verified.

        Args:
            now: Reference instant, defaults to the current UTC time.

        Returns:
            DashboardStats built from one consistent fan-out.

        Raises:
            DataAccessError: If any of the queries fails.
        """
        now = ensure_utc(now) if now else utc_now()
        since_yesterday = start_of_day(now) - timedelta(days=1)
        months = compute_windows(Period.MONTHLY, now)

        users = self.repositories.users
        hostels = self.repositories.hostels
        bookings = self.repositories.bookings
        payments = self.repositories.payments

        (
            total_users,
            new_users_today,
            total_hostels,
            verified_hostels,
            total_bookings,
            active_bookings,
            revenue_this_month,
            revenue_previous_month,
            users_this_month,
            users_previous_month,
            bookings_this_month,
            bookings_previous_month,
        ) = await gather_queries(
            users.count(),
            users.count(User.verified_at > since_yesterday),
            hostels.count(),
            hostels.count(Hostel.is_verified == True),  # noqa: E712
            bookings.count(),
            bookings.count(Booking.status == BookingStatus.CHECKED_IN),
            payments.sum("amount", in_window(Payment.payment_date, months.current)),
            payments.sum("amount", in_window(Payment.payment_date, months.previous)),
            users.count(in_window(User.verified_at, months.current)),
            users.count(in_window(User.verified_at, months.previous)),
            bookings.count(in_window(Booking.created_at, months.current)),
            bookings.count(in_window(Booking.created_at, months.previous)),
            report="dashboard_stats",
        )

        revenue = ScalarMetric(
            current=to_amount(revenue_this_month), previous=to_amount(revenue_previous_month)
        )
        verified_users = ScalarMetric(current=users_this_month, previous=users_previous_month)
        created_bookings = ScalarMetric(
            current=bookings_this_month, previous=bookings_previous_month
        )

        return DashboardStats(
            total_users=total_users,
            new_users_today=new_users_today,
            total_hostels=total_hostels,
            verified_hostels=verified_hostels,
            total_bookings=total_bookings,
            active_bookings=active_bookings,
            total_revenue=revenue.current,
            revenue_this_month=revenue.current,
            user_growth=verified_users.growth_percent,
            booking_growth=created_bookings.growth_percent,
            revenue_growth=revenue.growth_percent,
        )
