"""In-memory records owned by the data store."""

from bookingwiz.models.booking import Booking
from bookingwiz.models.experience import Experience
from bookingwiz.models.user import User

__all__ = [
    "Booking",
    "Experience",
    "User",
]
