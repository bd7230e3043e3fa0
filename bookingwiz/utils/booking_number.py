"""Booking reference number generation utilities."""

import random
import re
from collections.abc import Callable
from datetime import UTC, datetime

from bookingwiz.core.exceptions import ReferenceNumberExhausted

REFERENCE_PREFIX = "SM"
REFERENCE_PATTERN = re.compile(r"^SM-\d{4}-\d{6}$")

# Random part is drawn from [0, REFERENCE_RANGE)
REFERENCE_RANGE = 999999


def generate_reference_number(year: int | None = None, rng: random.Random | None = None) -> str:
    """Generate a booking reference number in format SM-YYYY-NNNNNN.

    Args:
        year: Year to stamp, defaults to the current UTC year
        rng: Random source, defaults to the module-level generator

    Returns:
        str: Reference number like 'SM-2025-004217'
    """
    if year is None:
        year = datetime.now(UTC).year
    number = (rng or random).randrange(REFERENCE_RANGE)
    return f"{REFERENCE_PREFIX}-{year:04d}-{number:06d}"


def generate_unique_reference_number(
    is_taken: Callable[[str], bool],
    max_attempts: int = 10,
    rng: random.Random | None = None,
    year: int | None = None,
) -> str:
    """Generate a reference number not already in use.

    Args:
        is_taken: Predicate reporting whether a candidate is already assigned
        max_attempts: Number of candidates to try before giving up
        rng: Random source passed to generate_reference_number
        year: Year to stamp, defaults to the current UTC year

    Returns:
        str: Unused reference number

    Raises:
        ReferenceNumberExhausted: If every candidate collided
    """
    for _ in range(max_attempts):
        reference = generate_reference_number(year=year, rng=rng)
        if not is_taken(reference):
            return reference
    raise ReferenceNumberExhausted(max_attempts)


def is_reference_number(value: str) -> bool:
    return bool(REFERENCE_PATTERN.match(value))
