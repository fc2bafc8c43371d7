from app.hostels.models.hostel import Hostel, Room

__all__ = ["Hostel", "Room"]
