"""Revenue statistics service."""

from datetime import datetime

from app.admin.schemas.admin_statistics import RevenueOverview, ScalarMetric
from app.admin.services.statistics.base import (
    Period,
    compute_windows,
    gather_queries,
    in_window,
    parse_period,
)
from app.admin.services.statistics.calculations import reduce_counts, reduce_sums, to_amount
from app.core.datetime_utils import ensure_utc, utc_now
from app.core.repository import ReadRepository
from app.payments.models.payment import Payment


class RevenueService:
    """Service for revenue-related statistics."""

    def __init__(self, payments: ReadRepository[Payment]):
        self.payments = payments

    async def get_overview(
        self, period: Period | str = Period.MONTHLY, now: datetime | None = None
    ) -> RevenueOverview:
        """Get revenue for the current window compared with the previous one.

        Args:
            period: daily, weekly or monthly (see ``compute_windows``).
            now: Reference instant, defaults to the current UTC time.

        Returns:
            RevenueOverview with method and status breakdowns limited to the
            current window.

        Raises:
            InvalidPeriodError: If ``period`` is not supported.
            DataAccessError: If any of the queries fails.
        """
        period = parse_period(period)
        now = ensure_utc(now) if now else utc_now()
        windows = compute_windows(period, now)
        current_filter = in_window(Payment.payment_date, windows.current)

        current, previous, by_method, by_status = await gather_queries(
            self.payments.sum("amount", current_filter),
            self.payments.sum("amount", in_window(Payment.payment_date, windows.previous)),
            self.payments.group_sum_by("payment_method", "amount", current_filter),
            self.payments.group_count_by("status", current_filter),
            report="revenue_overview",
        )

        revenue = ScalarMetric(current=to_amount(current), previous=to_amount(previous))
        return RevenueOverview(
            total=revenue.current,
            previous=revenue.previous,
            growth=revenue.growth_percent,
            by_method=reduce_sums(by_method),
            by_status=reduce_counts(by_status),
            period=period,
        )
