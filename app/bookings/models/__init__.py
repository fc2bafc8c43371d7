from app.bookings.models.booking import Booking, BookingStatus, BookingType

__all__ = ["Booking", "BookingStatus", "BookingType"]
