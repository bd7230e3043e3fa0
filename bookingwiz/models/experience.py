"""Experience record held by the data store."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Experience:
    """A bookable tour or retreat offering."""

    id: str
    name: str
    description: str
    price: Decimal
    duration: str  # free text, e.g. "3-7 days"
    image: str
    type: str  # category tag
