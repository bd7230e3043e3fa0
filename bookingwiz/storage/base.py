"""Base data store interface.

All store implementations must implement this interface. Lookups report a
missing record by returning None; callers decide whether that is an error.
Returned records are copies, so mutating them never changes stored state.
"""

from abc import ABC, abstractmethod

from bookingwiz.domain.payment_state import PaymentStatus
from bookingwiz.models import Booking, Experience, User
from bookingwiz.schemas.booking import BookingCreate
from bookingwiz.schemas.experience import ExperienceCreate
from bookingwiz.schemas.user import UserCreate


class Storage(ABC):
    """Abstract base class for the booking data store."""

    # Users

    @abstractmethod
    def get_user(self, user_id: str) -> User | None:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Find a user by exact, case-sensitive username."""
        pass

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        pass

    # Experiences

    @abstractmethod
    def get_all_experiences(self) -> list[Experience]:
        """Return every experience in catalog order."""
        pass

    @abstractmethod
    def get_experience(self, experience_id: str) -> Experience | None:
        pass

    @abstractmethod
    def create_experience(self, data: ExperienceCreate) -> Experience:
        pass

    # Bookings

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        pass

    @abstractmethod
    def get_booking_by_reference(self, reference_number: str) -> Booking | None:
        pass

    @abstractmethod
    def create_booking(self, data: BookingCreate) -> Booking:
        """Store a new booking.

        Assigns the id and reference number, sets the payment status to
        pending and stamps the creation time.

        Args:
            data: Validated booking payload

        Returns:
            Booking: The stored record
        """
        pass

    @abstractmethod
    def update_booking_payment_status(
        self,
        booking_id: str,
        status: PaymentStatus | str,
        payment_intent_id: str | None = None,
    ) -> Booking | None:
        """Overwrite a booking's payment status.

        Any status may follow any other. The payment intent id is replaced
        only when a new one is given.

        Args:
            booking_id: Booking identifier
            status: New payment status
            payment_intent_id: New payment intent id, if any

        Returns:
            Booking | None: Updated record, or None if no such booking
        """
        pass
