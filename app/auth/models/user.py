import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class UserRole(str, enum.Enum):
    STUDENT = "student"
    HOSTEL_ADMIN = "hostel_admin"
    SUPER_ADMIN = "super_admin"


class User(Base):
    """
    Read model for platform users.

    Attributes:
        id: Unique UUID primary key
        email: Unique email address
        name: Display name (optional, older accounts have none)
        role: One of student, hostel_admin, super_admin
        is_verified: Whether the email address was confirmed
        verified_at: When the account was verified (NULL until then)
        created_at: Account creation timestamp
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(unique=True, index=True)
    name: Mapped[str | None] = mapped_column(default=None)

    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, values_callable=lambda obj: [e.value for e in obj]),
        default=UserRole.STUDENT,
        index=True,
    )
    is_verified: Mapped[bool] = mapped_column(default=False)
    verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"
