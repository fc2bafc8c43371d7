"""Statistics schemas for the admin dashboard.

Every report is a frozen model built once per request. Fields are
snake_case in Python and camelCase on the wire (``totalUsers``, ``byRole``).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from app.admin.services.statistics.base import Period
from app.admin.services.statistics.calculations import calculate_growth
from app.core.datetime_utils import UTCDatetime

GroupedMetric = dict[str, int | float]


class ReportModel(BaseModel):
    """Base for immutable, camelCase-serialized report models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============ Scalars ============


class ScalarMetric(ReportModel):
    """A value compared against its previous-period baseline."""

    current: int | float
    previous: int | float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def growth_percent(self) -> float:
        return calculate_growth(self.current, self.previous)


# ============ Dashboard ============


class DashboardStats(ReportModel):
    """Dashboard-wide snapshot."""

    total_users: int = Field(description="All registered users")
    new_users_today: int = Field(description="Users verified since yesterday's midnight")
    total_hostels: int
    verified_hostels: int
    total_bookings: int
    active_bookings: int = Field(description="Bookings currently checked in")
    total_revenue: float = Field(description="Sum of this month's payments")
    revenue_this_month: float = Field(description="Sum of this month's payments")
    user_growth: float = Field(description="Verified users, month over month (%)")
    booking_growth: float = Field(description="Bookings created, month over month (%)")
    revenue_growth: float = Field(description="Revenue, month over month (%)")


# ============ Overviews ============


class UsersOverview(ReportModel):
    total: int
    weekly: int = Field(description="Users verified in the last 7 days")
    monthly: int = Field(description="Users verified since the first of the month")
    growth: float = Field(description="This month vs the whole previous month (%)")
    by_role: GroupedMetric


class BookingsOverview(ReportModel):
    total: int
    monthly: int = Field(description="Bookings created since the first of the month")
    growth: float
    by_status: GroupedMetric
    by_type: GroupedMetric


class HostelsOverview(ReportModel):
    total: int
    verified: int
    accepting_bookings: int
    verification_rate: float = Field(description="verified / total * 100, 0 when empty")
    by_verification_status: GroupedMetric = Field(description="verified / unverified")
    by_booking_status: GroupedMetric = Field(description="accepting / closed")


class RevenueOverview(ReportModel):
    total: float = Field(description="Payments in the current window")
    previous: float = Field(description="Payments in the previous window")
    growth: float
    by_method: GroupedMetric = Field(description="Amount per payment method, current window")
    by_status: GroupedMetric = Field(description="Payment count per status, current window")
    period: Period


# ============ Activity Feed ============


class ActivityUser(ReportModel):
    id: str
    name: str
    email: str


class Activity(ReportModel):
    """One normalized event in the recent-activity feed."""

    id: str
    type: Literal["user", "booking", "payment"]
    action: str
    description: str
    timestamp: UTCDatetime
    user: ActivityUser | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
