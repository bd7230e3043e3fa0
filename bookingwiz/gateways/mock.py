"""Mock payment gateway adapter.

Never contacts a payment processor.
"""

import time
from decimal import Decimal

from bookingwiz.gateways.base import (
    GatewayType,
    OutcomeStatus,
    PaymentGateway,
    PaymentIntent,
    PaymentOutcome,
)


def _now_ms() -> int:
    return int(time.time() * 1000)


class MockGateway(PaymentGateway):
    """Mock payment gateway.

    Intents are stamped with the current time in milliseconds and every
    attempt succeeds.
    """

    @property
    def gateway_type(self) -> GatewayType:
        return GatewayType.MOCK

    async def create_intent(
        self,
        amount: Decimal,
        currency: str,
        booking_id: str | None = None,
    ) -> PaymentIntent:
        """Create mock payment intent (always succeeds)."""
        intent_id = f"pi_mock_{_now_ms()}"
        return PaymentIntent(
            id=intent_id,
            amount=amount,
            currency=currency,
            booking_id=booking_id,
            client_secret=f"{intent_id}_secret_mock",
        )

    async def attempt(self, intent: PaymentIntent) -> PaymentOutcome:
        """Attempt mock payment (always succeeds)."""
        return PaymentOutcome(
            status=OutcomeStatus.SUCCEEDED,
            payment_intent_id=intent.id,
        )
