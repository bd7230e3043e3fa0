"""Pydantic schemas for API validation."""

from bookingwiz.schemas.booking import (
    BookingCreate,
    BookingQuoteRequest,
    BookingQuoteResponse,
    BookingResponse,
)
from bookingwiz.schemas.experience import ExperienceCreate, ExperienceResponse
from bookingwiz.schemas.payment import (
    PaymentConfirmRequest,
    PaymentConfirmResponse,
    PaymentIntentCreate,
    PaymentIntentResponse,
)
from bookingwiz.schemas.user import UserCreate

__all__ = [
    # Booking
    "BookingCreate",
    "BookingQuoteRequest",
    "BookingQuoteResponse",
    "BookingResponse",
    # Experience
    "ExperienceCreate",
    "ExperienceResponse",
    # Payment
    "PaymentConfirmRequest",
    "PaymentConfirmResponse",
    "PaymentIntentCreate",
    "PaymentIntentResponse",
    # User
    "UserCreate",
]
