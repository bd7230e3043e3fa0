"""Booking record held by the data store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from bookingwiz.domain.payment_state import INITIAL_PAYMENT_STATUS, PaymentStatus


@dataclass
class Booking:
    """A guest's reservation against one experience."""

    id: str
    reference_number: str  # SM-YYYY-NNNNNN
    experience_id: str  # not checked against the experience catalog

    # Guest
    first_name: str
    last_name: str
    email: str
    phone: str

    # Stay
    checkin_date: str
    checkout_date: str
    participants: int
    total_amount: Decimal
    special_requests: str | None = None

    # Payment
    payment_status: PaymentStatus = INITIAL_PAYMENT_STATUS
    payment_intent_id: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
