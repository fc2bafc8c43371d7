import enum
import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import DateTime, Enum, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class BookingType(str, enum.Enum):
    SEMESTER = "semester"
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    hostel_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("hostels.id"), index=True)
    room_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("rooms.id"), default=None)

    student_name: Mapped[str] = mapped_column()
    student_email: Mapped[str] = mapped_column()

    booking_type: Mapped[BookingType] = mapped_column(
        Enum(BookingType, values_callable=lambda obj: [e.value for e in obj])
    )
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, values_callable=lambda obj: [e.value for e in obj]),
        default=BookingStatus.PENDING,
        index=True,
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))  # In cedis

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )

    # Relationships
    hostel = relationship("Hostel")
    room = relationship("Room")
    payments = relationship("Payment", back_populates="booking")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, status={self.status.value})>"
