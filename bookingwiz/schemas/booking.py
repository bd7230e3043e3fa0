"""Booking-related Pydantic schemas."""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from bookingwiz.domain.payment_state import PaymentStatus
from bookingwiz.schemas.base import CamelModel

TWO_PLACES = Decimal("0.01")
MAX_TOTAL_AMOUNT = Decimal("99999999.99")


class BookingCreate(CamelModel):
    """Schema for creating a booking.

    Server-assigned fields (id, referenceNumber, createdAt, paymentStatus,
    paymentIntentId) are ignored if a client sends them.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    experience_id: str = Field(..., min_length=1)

    # Dates are kept as the client sent them
    checkin_date: str = Field(..., min_length=1)
    checkout_date: str = Field(..., min_length=1)
    participants: int = Field(..., ge=1)

    # Guest
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str
    phone: str = Field(..., min_length=1)
    special_requests: str | None = None

    # Clients may send float arithmetic results like "59.970000000000006"
    total_amount: Decimal = Field(..., ge=0, le=MAX_TOTAL_AMOUNT)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        """Validate the address but store it exactly as sent."""
        validate_email(v)
        return v

    @field_validator("special_requests")
    @classmethod
    def empty_requests_to_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("total_amount")
    @classmethod
    def quantize_amount(cls, v: Decimal) -> Decimal:
        return v.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class BookingResponse(CamelModel):
    """Schema for booking response."""

    id: str
    reference_number: str
    experience_id: str

    # Guest
    first_name: str
    last_name: str
    email: str
    phone: str

    # Stay
    checkin_date: str
    checkout_date: str
    participants: int
    special_requests: str | None
    total_amount: Decimal

    # Payment
    payment_status: PaymentStatus
    payment_intent_id: str | None

    created_at: datetime


class BookingQuoteRequest(CamelModel):
    """Schema for pricing a booking without creating it."""

    experience_id: str = Field(..., min_length=1)
    participants: int = Field(default=1, ge=1)
    checkin_date: date | None = None
    checkout_date: date | None = None


class BookingQuoteResponse(CamelModel):
    """Schema for booking price quote."""

    experience_id: str
    unit_price: Decimal
    participants: int
    nights: int
    total_amount: Decimal
