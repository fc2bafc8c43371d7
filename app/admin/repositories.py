"""Read repositories over the four collections the dashboard reports on."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.auth.models.user import User
from app.bookings.models.booking import Booking
from app.core.repository import ReadRepository
from app.hostels.models.hostel import Hostel
from app.payments.models.payment import Payment


@dataclass(frozen=True)
class AnalyticsRepositories:
    users: ReadRepository[User]
    bookings: ReadRepository[Booking]
    hostels: ReadRepository[Hostel]
    payments: ReadRepository[Payment]

    @classmethod
    def from_session_factory(
        cls, session_factory: async_sessionmaker[AsyncSession]
    ) -> "AnalyticsRepositories":
        return cls(
            users=ReadRepository(session_factory, User),
            bookings=ReadRepository(session_factory, Booking),
            hostels=ReadRepository(session_factory, Hostel),
            payments=ReadRepository(session_factory, Payment),
        )
