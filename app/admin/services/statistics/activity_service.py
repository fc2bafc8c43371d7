"""Recent activity feed service.

Merges the newest verified users, bookings and payments into one feed
ordered by time, newest first.
"""

from app.admin.repositories import AnalyticsRepositories
from app.admin.schemas.admin_statistics import Activity, ActivityUser
from app.admin.services.statistics.base import gather_queries
from app.admin.services.statistics.calculations import to_amount
from app.auth.models.user import User
from app.bookings.models.booking import Booking
from app.core.config import settings
from app.core.constants import ACTIVITY_SOURCE_FETCH_SIZE, CURRENCY_SYMBOL
from app.core.datetime_utils import ensure_utc
from app.core.exceptions import ValidationError
from app.payments.models.payment import Payment


def user_activity(user: User) -> Activity:
    return Activity(
        id=str(user.id),
        type="user",
        action="REGISTERED",
        description=f"New user registered: {user.name or user.email}",
        timestamp=ensure_utc(user.verified_at),  # type: ignore[arg-type]
        user=ActivityUser(id=str(user.id), name=user.name or "Unnamed User", email=user.email),
        metadata={"role": user.role.value, "isVerified": user.is_verified},
    )


def booking_activity(booking: Booking) -> Activity:
    status = booking.status.value
    return Activity(
        id=str(booking.id),
        type="booking",
        action=status.upper(),
        description=f"Booking {status} for {booking.student_name}",
        timestamp=ensure_utc(booking.created_at),
        metadata={
            "hostelName": booking.hostel.name if booking.hostel else None,
            "roomNumber": booking.room.room_number if booking.room else None,
            "amount": to_amount(booking.total_amount),
            "status": status,
        },
    )


def payment_activity(payment: Payment) -> Activity:
    amount = to_amount(payment.amount)
    return Activity(
        id=str(payment.id),
        type="payment",
        action="PAYMENT_COMPLETED",
        description=f"Payment of {CURRENCY_SYMBOL}{amount:.2f} received",
        timestamp=ensure_utc(payment.payment_date),
        metadata={"amount": amount, "method": payment.payment_method.value},
    )


def merge_activities(activities: list[Activity], limit: int) -> list[Activity]:
    """Sort newest first and keep at most ``limit`` items.

    ``sorted`` is stable, so equal timestamps keep their input order.
    """
    return sorted(activities, key=lambda activity: activity.timestamp, reverse=True)[:limit]


class ActivityFeedService:
    """Service building the merged recent-activity feed."""

    def __init__(self, repositories: AnalyticsRepositories):
        self.repositories = repositories

    async def get_recent_activities(
        self, limit: int = settings.ACTIVITY_FEED_DEFAULT_LIMIT
    ) -> list[Activity]:
        """Get the most recent activities across users, bookings and payments.

        Each source contributes at most ``ACTIVITY_SOURCE_FETCH_SIZE`` records,
        so the feed never holds more than three times that many items
        whatever ``limit`` is.

        Args:
            limit: Maximum number of activities to return, must be positive.

        Returns:
            Activities sorted by timestamp, newest first.

        Raises:
            ValidationError: If ``limit`` is not a positive integer.
            DataAccessError: If any of the source queries fails.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("Limit must be a positive integer", field="limit")

        users, bookings, payments = await gather_queries(
            self.repositories.users.find(
                User.verified_at.is_not(None),
                order_by=User.verified_at.desc(),
                limit=ACTIVITY_SOURCE_FETCH_SIZE,
            ),
            self.repositories.bookings.find(
                order_by=Booking.created_at.desc(),
                limit=ACTIVITY_SOURCE_FETCH_SIZE,
                relations=("hostel", "room"),
            ),
            self.repositories.payments.find(
                order_by=Payment.payment_date.desc(),
                limit=ACTIVITY_SOURCE_FETCH_SIZE,
            ),
            report="recent_activities",
        )

        activities = [
            *(user_activity(user) for user in users),
            *(booking_activity(booking) for booking in bookings),
            *(payment_activity(payment) for payment in payments),
        ]
        return merge_activities(activities, limit)
