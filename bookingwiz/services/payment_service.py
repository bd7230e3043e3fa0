"""Payment service.

Moves bookings through their payment status around gateway calls.
The gateway only talks to the processor; status changes happen here.
"""

import logging
from decimal import Decimal

from bookingwiz.core.exceptions import NotFoundError, PaymentError
from bookingwiz.domain.payment_state import PaymentStatus, status_for_outcome
from bookingwiz.gateways.base import PaymentGateway, PaymentIntent, PaymentOutcome
from bookingwiz.models import Booking
from bookingwiz.storage.base import Storage

logger = logging.getLogger(__name__)


class PaymentService:
    """Service for payment intents and confirmations."""

    def __init__(self, storage: Storage, gateway: PaymentGateway, currency: str = "usd"):
        self.storage = storage
        self.gateway = gateway
        self.currency = currency

    async def create_intent(self, amount: Decimal, booking_id: str | None = None) -> PaymentIntent:
        """Create a payment intent and mark the booking as processing.

        An unknown booking id does not fail the request; the intent is still
        returned.

        Args:
            amount: Amount to charge
            booking_id: Booking to attach the intent to

        Returns:
            PaymentIntent: Intent with client secret
        """
        intent = await self.gateway.create_intent(
            amount=amount,
            currency=self.currency,
            booking_id=booking_id,
        )

        if booking_id:
            booking = self.storage.update_booking_payment_status(
                booking_id, PaymentStatus.PROCESSING, intent.id
            )
            if booking is None:
                logger.warning(f"Payment intent {intent.id} created for unknown booking {booking_id}")
            else:
                logger.info(f"Booking {booking.reference_number} processing payment {intent.id}")

        return intent

    async def confirm(self, payment_intent_id: str, booking_id: str) -> tuple[PaymentOutcome, Booking]:
        """Attempt the payment and record the outcome on the booking.

        Args:
            payment_intent_id: Intent to attempt
            booking_id: Booking being paid

        Returns:
            tuple: Gateway outcome and the updated booking

        Raises:
            NotFoundError: If the booking does not exist
            PaymentError: If the gateway declined the payment
        """
        booking = self.storage.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking")

        outcome = await self.gateway.attempt(
            PaymentIntent(
                id=payment_intent_id,
                amount=booking.total_amount,
                currency=self.currency,
                booking_id=booking_id,
            )
        )

        status = status_for_outcome(outcome.status.value)
        updated = self.storage.update_booking_payment_status(booking_id, status, payment_intent_id)
        if updated is None:
            raise NotFoundError("Booking")

        logger.info(
            f"Booking {updated.reference_number} payment {outcome.status.value} "
            f"({payment_intent_id} via {self.gateway.gateway_type.value})"
        )

        if not outcome.success:
            raise PaymentError(outcome.error_message or "Payment was declined")

        return outcome, updated
