"""In-memory data store."""

import logging
import random
import threading
import uuid
from dataclasses import replace
from datetime import UTC, datetime

from bookingwiz.domain.payment_state import INITIAL_PAYMENT_STATUS, PaymentStatus
from bookingwiz.models import Booking, Experience, User
from bookingwiz.schemas.booking import BookingCreate
from bookingwiz.schemas.experience import ExperienceCreate
from bookingwiz.schemas.user import UserCreate
from bookingwiz.storage.base import Storage
from bookingwiz.storage.catalog import default_experiences
from bookingwiz.utils.booking_number import generate_unique_reference_number

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """Process-local store backed by dicts.

    Every read and write happens under one lock, so concurrent requests see
    whole records only. Nothing survives a restart.
    """

    def __init__(
        self,
        experiences: list[Experience] | None = None,
        reference_max_attempts: int = 10,
        rng: random.Random | None = None,
    ):
        self.reference_max_attempts = reference_max_attempts
        self._rng = rng
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._experiences: dict[str, Experience] = {}
        self._bookings: dict[str, Booking] = {}

        for experience in default_experiences() if experiences is None else experiences:
            self._experiences[experience.id] = replace(experience)

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    # Users

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
        return None

    def create_user(self, data: UserCreate) -> User:
        user = User(id=self._new_id(), **data.model_dump())
        with self._lock:
            self._users[user.id] = user
        return replace(user)

    # Experiences

    def get_all_experiences(self) -> list[Experience]:
        with self._lock:
            return [replace(experience) for experience in self._experiences.values()]

    def get_experience(self, experience_id: str) -> Experience | None:
        with self._lock:
            experience = self._experiences.get(experience_id)
            return replace(experience) if experience else None

    def create_experience(self, data: ExperienceCreate) -> Experience:
        experience = Experience(id=self._new_id(), **data.model_dump())
        with self._lock:
            self._experiences[experience.id] = experience
        return replace(experience)

    # Bookings

    def _reference_taken(self, reference_number: str) -> bool:
        return any(b.reference_number == reference_number for b in self._bookings.values())

    def get_booking(self, booking_id: str) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return replace(booking) if booking else None

    def get_booking_by_reference(self, reference_number: str) -> Booking | None:
        with self._lock:
            for booking in self._bookings.values():
                if booking.reference_number == reference_number:
                    return replace(booking)
        return None

    def create_booking(self, data: BookingCreate) -> Booking:
        created_at = datetime.now(UTC)
        with self._lock:
            # Reference year and creation time come from the same clock
            reference_number = generate_unique_reference_number(
                self._reference_taken,
                max_attempts=self.reference_max_attempts,
                rng=self._rng,
                year=created_at.year,
            )
            booking = Booking(
                id=self._new_id(),
                reference_number=reference_number,
                payment_status=INITIAL_PAYMENT_STATUS,
                payment_intent_id=None,
                created_at=created_at,
                **data.model_dump(),
            )
            self._bookings[booking.id] = booking
            known_experience = booking.experience_id in self._experiences

        if not known_experience:
            logger.debug(f"Booking {booking.reference_number} references unknown experience {booking.experience_id}")
        return replace(booking)

    def update_booking_payment_status(
        self,
        booking_id: str,
        status: PaymentStatus | str,
        payment_intent_id: str | None = None,
    ) -> Booking | None:
        status = PaymentStatus(status)
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None

            updated = replace(
                booking,
                payment_status=status,
                payment_intent_id=payment_intent_id or booking.payment_intent_id,
            )
            self._bookings[booking_id] = updated
        return replace(updated)
