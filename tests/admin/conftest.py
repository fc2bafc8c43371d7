"""Shared dataset for statistics service and route tests.

All reports are evaluated at NOW (2026-03-15 12:00 UTC).
"""

from datetime import UTC, datetime

import pytest

from app.auth.models.user import UserRole
from app.bookings.models.booking import BookingStatus, BookingType
from app.payments.models.payment import PaymentMethod
from tests.utils.factories import (
    create_booking_factory,
    create_hostel_factory,
    create_payment_factory,
    create_room_factory,
    create_user_factory,
)

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
async def seeded(db_session):
    """
    Users: 2 verified since yesterday, 1 earlier this month, 1 last month, 1 unverified.
    Hostels: 2 verified and accepting, 1 unverified and closed.
    Bookings: 2 created this month (1 checked in), 2 last month.
    Payments: 450.00 this month, 200.00 last month, one older and one at NOW.
    """
    users = [
        await create_user_factory(db_session, verified_at=datetime(2026, 3, 15, 8, tzinfo=UTC)),
        await create_user_factory(db_session, verified_at=datetime(2026, 3, 14, 10, tzinfo=UTC)),
        await create_user_factory(
            db_session,
            role=UserRole.HOSTEL_ADMIN,
            verified_at=datetime(2026, 3, 2, tzinfo=UTC),
        ),
        await create_user_factory(db_session, verified_at=datetime(2026, 2, 10, tzinfo=UTC)),
        await create_user_factory(db_session, role=UserRole.SUPER_ADMIN),
    ]

    legon = await create_hostel_factory(db_session, name="Legon Hall", is_verified=True)
    await create_hostel_factory(db_session, is_verified=True)
    await create_hostel_factory(db_session, is_verified=False, accepting_bookings=False)
    room = await create_room_factory(db_session, legon, room_number="A101")

    checked_in = await create_booking_factory(
        db_session,
        legon,
        room=room,
        status=BookingStatus.CHECKED_IN,
        created_at=datetime(2026, 3, 5, tzinfo=UTC),
    )
    pending = await create_booking_factory(
        db_session,
        legon,
        status=BookingStatus.PENDING,
        booking_type=BookingType.MONTHLY,
        created_at=datetime(2026, 3, 10, tzinfo=UTC),
    )
    confirmed = await create_booking_factory(
        db_session,
        legon,
        status=BookingStatus.CONFIRMED,
        created_at=datetime(2026, 2, 20, tzinfo=UTC),
    )
    cancelled = await create_booking_factory(
        db_session,
        legon,
        status=BookingStatus.CANCELLED,
        created_at=datetime(2026, 2, 1, tzinfo=UTC),
    )

    payments = [
        await create_payment_factory(
            db_session, checked_in, amount="300.00", payment_date=datetime(2026, 3, 5, tzinfo=UTC)
        ),
        await create_payment_factory(
            db_session,
            pending,
            amount="150.00",
            payment_method=PaymentMethod.CARD,
            payment_date=datetime(2026, 3, 12, tzinfo=UTC),
        ),
        await create_payment_factory(
            db_session, confirmed, amount="200.00", payment_date=datetime(2026, 2, 20, tzinfo=UTC)
        ),
        await create_payment_factory(
            db_session, cancelled, amount="100.00", payment_date=datetime(2026, 1, 15, tzinfo=UTC)
        ),
        await create_payment_factory(db_session, pending, amount="50.00", payment_date=NOW),
    ]

    return {"users": users, "payments": payments}
