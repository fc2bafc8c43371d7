import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Hostel(Base):
    __tablename__ = "hostels"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column()
    email: Mapped[str | None] = mapped_column(default=None)

    is_verified: Mapped[bool] = mapped_column(default=False, index=True)
    accepting_bookings: Mapped[bool] = mapped_column(default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    rooms = relationship("Room", back_populates="hostel")

    def __repr__(self) -> str:
        return f"<Hostel(id={self.id}, name={self.name}, verified={self.is_verified})>"


class Room(Base):
    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    hostel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hostels.id", ondelete="CASCADE"), index=True
    )
    room_number: Mapped[str] = mapped_column()

    hostel = relationship("Hostel", back_populates="rooms")

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, room_number={self.room_number})>"
