"""Booking statistics service."""

from datetime import datetime

from app.admin.schemas.admin_statistics import BookingsOverview, ScalarMetric
from app.admin.services.statistics.base import Period, compute_windows, gather_queries, in_window
from app.admin.services.statistics.calculations import reduce_counts
from app.bookings.models.booking import Booking
from app.core.datetime_utils import ensure_utc, utc_now
from app.core.repository import ReadRepository


class BookingStatisticsService:
    """Service for booking-related statistics."""

    def __init__(self, bookings: ReadRepository[Booking]):
        self.bookings = bookings

    async def get_overview(self, now: datetime | None = None) -> BookingsOverview:
        """Get bookings overview with status and type breakdowns."""
        now = ensure_utc(now) if now else utc_now()
        months = compute_windows(Period.MONTHLY, now)

        total, monthly, previous_month, by_status, by_type = await gather_queries(
            self.bookings.count(),
            self.bookings.count(in_window(Booking.created_at, months.current)),
            self.bookings.count(in_window(Booking.created_at, months.previous)),
            self.bookings.group_count_by("status"),
            self.bookings.group_count_by("booking_type"),
            report="bookings_overview",
        )

        return BookingsOverview(
            total=total,
            monthly=monthly,
            growth=ScalarMetric(current=monthly, previous=previous_month).growth_percent,
            by_status=reduce_counts(by_status),
            by_type=reduce_counts(by_type),
        )
