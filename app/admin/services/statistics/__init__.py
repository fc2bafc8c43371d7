"""Statistics module for the admin analytics dashboard.

This module is split into domain-specific services:
- base: Period windows, window filters, concurrent query fan-out
- calculations: Growth, rates and grouped breakdown reducers
- dashboard_service: Dashboard-wide KPIs
- user_service: Users overview
- booking_service: Bookings overview
- hostel_service: Hostels overview
- revenue_service: Revenue overview per period
- activity_service: Merged recent-activity feed

Service classes import the schemas, which import from this package, so only
the dependency-free helpers are re-exported here.
"""

from app.admin.services.statistics.base import (
    Period,
    PeriodPair,
    TimeWindow,
    compute_windows,
    gather_queries,
    in_window,
    parse_period,
)
from app.admin.services.statistics.calculations import (
    calculate_growth,
    calculate_rate,
    normalize_label,
    reduce_counts,
    reduce_sums,
    round_one_decimal,
)

__all__ = [
    # Periods
    "Period",
    "PeriodPair",
    "TimeWindow",
    "compute_windows",
    "parse_period",
    "in_window",
    "gather_queries",
    # Calculations
    "calculate_growth",
    "calculate_rate",
    "normalize_label",
    "reduce_counts",
    "reduce_sums",
    "round_one_decimal",
]
