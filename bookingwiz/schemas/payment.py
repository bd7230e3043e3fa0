"""Payment-related Pydantic schemas."""

from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from bookingwiz.schemas.base import CamelModel
from bookingwiz.schemas.booking import BookingResponse


class PaymentIntentCreate(CamelModel):
    """Schema for creating a (mock) payment intent."""

    amount: Decimal = Field(..., gt=0)
    booking_id: str | None = None

    @field_validator("booking_id", mode="before")
    @classmethod
    def ignore_malformed_booking_id(cls, v: Any) -> str | None:
        """Anything but a non-empty string means no booking to update."""
        return v if isinstance(v, str) and v else None


class PaymentIntentResponse(CamelModel):
    """Schema for payment intent response."""

    client_secret: str
    payment_intent_id: str


class PaymentConfirmRequest(CamelModel):
    """Schema for confirming a payment."""

    payment_intent_id: str = Field(..., min_length=1)
    booking_id: str = Field(..., min_length=1)


class PaymentConfirmResponse(CamelModel):
    """Schema for payment confirmation response."""

    success: bool = True
    booking: BookingResponse
    payment_status: str = "succeeded"
