"""Payment endpoints.

Payments are mocked: no processor is contacted.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from bookingwiz.api.deps import PaymentServiceDep
from bookingwiz.core.exceptions import ValidationError, internal_errors
from bookingwiz.schemas.booking import BookingResponse
from bookingwiz.schemas.payment import (
    PaymentConfirmRequest,
    PaymentConfirmResponse,
    PaymentIntentCreate,
    PaymentIntentResponse,
)
from bookingwiz.utils.validators import decode

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payment_service: PaymentServiceDep,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> PaymentIntentResponse:
    """Create a mock payment intent, moving the booking to processing."""
    result = decode(PaymentIntentCreate, payload or {})
    if not result.ok:
        raise ValidationError("Valid amount is required", result.errors)

    with internal_errors("creating payment intent"):
        intent = await payment_service.create_intent(result.value.amount, result.value.booking_id)

    return PaymentIntentResponse(
        client_secret=intent.client_secret,
        payment_intent_id=intent.id,
    )


@router.post("/confirm-payment", response_model=PaymentConfirmResponse)
async def confirm_payment(
    payment_service: PaymentServiceDep,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> PaymentConfirmResponse:
    """Confirm a payment and mark the booking completed."""
    result = decode(PaymentConfirmRequest, payload or {})
    if not result.ok:
        raise ValidationError("Payment intent ID and booking ID are required", result.errors)
    request = result.value

    with internal_errors("confirming payment"):
        outcome, booking = await payment_service.confirm(request.payment_intent_id, request.booking_id)

    return PaymentConfirmResponse(
        success=outcome.success,
        booking=BookingResponse.model_validate(booking),
        payment_status=outcome.status.value,
    )
