"""
Database base module - imports all read models so they register with Base.

Importing this module guarantees every table is known to ``Base.metadata``
and every string-based relationship can be resolved.
"""

from app.auth.models.user import User
from app.bookings.models.booking import Booking
from app.db.session import Base
from app.hostels.models.hostel import Hostel, Room
from app.payments.models.payment import Payment

__all__ = [
    "Base",
    "User",
    "Hostel",
    "Room",
    "Booking",
    "Payment",
]
