"""Hostel statistics service."""

from app.admin.schemas.admin_statistics import HostelsOverview
from app.admin.services.statistics.base import gather_queries
from app.admin.services.statistics.calculations import calculate_rate, reduce_counts
from app.core.constants import BOOKING_AVAILABILITY_LABELS, VERIFICATION_LABELS
from app.core.repository import ReadRepository
from app.hostels.models.hostel import Hostel


class HostelStatisticsService:
    """Service for hostel-related statistics."""

    def __init__(self, hostels: ReadRepository[Hostel]):
        self.hostels = hostels

    async def get_overview(self) -> HostelsOverview:
        """Get hostels overview.

        Boolean breakdowns use fixed labels: ``verified``/``unverified`` and
        ``accepting``/``closed``. The verification rate is 0.0 when there are
        no hostels.
        """
        total, verified, accepting, by_verification, by_availability = await gather_queries(
            self.hostels.count(),
            self.hostels.count(Hostel.is_verified == True),  # noqa: E712
            self.hostels.count(Hostel.accepting_bookings == True),  # noqa: E712
            self.hostels.group_count_by("is_verified"),
            self.hostels.group_count_by("accepting_bookings"),
            report="hostels_overview",
        )

        return HostelsOverview(
            total=total,
            verified=verified,
            accepting_bookings=accepting,
            verification_rate=calculate_rate(verified, total),
            by_verification_status=reduce_counts(by_verification, VERIFICATION_LABELS),
            by_booking_status=reduce_counts(by_availability, BOOKING_AVAILABILITY_LABELS),
        )
