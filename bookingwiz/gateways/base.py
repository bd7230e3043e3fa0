"""Base payment gateway interface.

All gateway adapters must implement this interface.
Business logic should NOT live in adapters - only gateway communication.
Booking status changes belong to the payment service.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class GatewayType(str, Enum):
    """Supported payment gateways."""

    MOCK = "mock"


class OutcomeStatus(str, Enum):
    """Result of attempting a payment."""

    SUCCEEDED = "succeeded"
    DECLINED = "declined"


@dataclass
class PaymentIntent:
    """An attempted payment, identified by the gateway."""

    id: str
    amount: Decimal
    currency: str
    booking_id: str | None = None
    client_secret: str | None = None


@dataclass
class PaymentOutcome:
    """Result of a payment attempt."""

    status: OutcomeStatus
    payment_intent_id: str
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED


class PaymentGateway(ABC):
    """Abstract base class for payment gateways."""

    @property
    @abstractmethod
    def gateway_type(self) -> GatewayType:
        """Return the gateway type."""
        pass

    @abstractmethod
    async def create_intent(
        self,
        amount: Decimal,
        currency: str,
        booking_id: str | None = None,
    ) -> PaymentIntent:
        """Create a payment intent.

        Args:
            amount: Amount in major currency units
            currency: Currency code
            booking_id: Booking the payment is for, if known

        Returns:
            PaymentIntent with gateway identifiers
        """
        pass

    @abstractmethod
    async def attempt(self, intent: PaymentIntent) -> PaymentOutcome:
        """Attempt to collect a payment.

        Args:
            intent: Intent previously returned by create_intent

        Returns:
            PaymentOutcome: succeeded or declined
        """
        pass
