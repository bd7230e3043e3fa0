"""Booking price calculation.

total = unit price x participants x nights, with at least one night charged.
Without both dates the stay counts as a single night.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def count_nights(checkin_date: date | None, checkout_date: date | None) -> int:
    """Number of nights charged for a stay.

    Args:
        checkin_date: Check-in date, if chosen
        checkout_date: Check-out date, if chosen

    Returns:
        int: Nights between the dates, never less than 1
    """
    if checkin_date is None or checkout_date is None:
        return 1
    return max(1, (checkout_date - checkin_date).days)


def calculate_total(
    unit_price: Decimal,
    participants: int,
    checkin_date: date | None = None,
    checkout_date: date | None = None,
) -> tuple[int, Decimal]:
    """Calculate the total amount for a booking.

    Returns:
        tuple: (nights, total) with total rounded to cents
    """
    nights = count_nights(checkin_date, checkout_date)
    total = (unit_price * participants * nights).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return nights, total
