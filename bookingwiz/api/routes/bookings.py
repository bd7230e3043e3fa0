"""Booking endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from bookingwiz.api.deps import StorageDep
from bookingwiz.core.exceptions import NotFoundError, ValidationError, internal_errors
from bookingwiz.domain.pricing import calculate_total
from bookingwiz.models import Booking
from bookingwiz.schemas.booking import (
    BookingCreate,
    BookingQuoteRequest,
    BookingQuoteResponse,
    BookingResponse,
)
from bookingwiz.utils.booking_number import is_reference_number
from bookingwiz.utils.validators import decode

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    storage: StorageDep,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> Booking:
    """Create a new booking in pending payment status."""
    result = decode(BookingCreate, payload or {})
    if not result.ok:
        raise ValidationError("Validation error", result.errors)

    with internal_errors("creating booking"):
        booking = storage.create_booking(result.value)

    logger.info(
        f"Booking created | reference={booking.reference_number} "
        f"experience={booking.experience_id} participants={booking.participants}"
    )
    return booking


@router.post("/quote", response_model=BookingQuoteResponse)
async def quote_booking(
    storage: StorageDep,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> BookingQuoteResponse:
    """Calculate the total for a booking without creating it."""
    result = decode(BookingQuoteRequest, payload or {})
    if not result.ok:
        raise ValidationError("Validation error", result.errors)
    request = result.value

    with internal_errors("calculating quote"):
        experience = storage.get_experience(request.experience_id)
    if not experience:
        raise NotFoundError("Experience")

    nights, total = calculate_total(
        experience.price,
        request.participants,
        request.checkin_date,
        request.checkout_date,
    )
    return BookingQuoteResponse(
        experience_id=experience.id,
        unit_price=experience.price,
        participants=request.participants,
        nights=nights,
        total_amount=total,
    )


@router.get("/{reference}", response_model=BookingResponse)
async def get_booking_by_reference(reference: str, storage: StorageDep) -> Booking:
    """Get a booking by its reference number."""
    if not is_reference_number(reference):
        raise NotFoundError("Booking")

    with internal_errors("fetching booking"):
        booking = storage.get_booking_by_reference(reference)
    if not booking:
        raise NotFoundError("Booking")
    return booking
