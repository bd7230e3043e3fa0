"""Payment status of a booking.

Transitions are unconstrained: any operation that sets a status
may set any value, and no status is terminal.
"""

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment lifecycle states of a booking."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


INITIAL_PAYMENT_STATUS = PaymentStatus.PENDING

# Gateway outcome -> booking payment status
OUTCOME_STATUS: dict[str, PaymentStatus] = {
    "succeeded": PaymentStatus.COMPLETED,
    "declined": PaymentStatus.FAILED,
}


def status_for_outcome(outcome: str) -> PaymentStatus:
    try:
        return OUTCOME_STATUS[outcome]
    except KeyError:
        raise ValueError(f"Unknown payment outcome: {outcome}") from None
