"""Experience-related Pydantic schemas."""

from decimal import Decimal

from pydantic import Field

from bookingwiz.schemas.base import CamelModel


class ExperienceBase(CamelModel):
    """Base experience schema."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    duration: str = Field(..., max_length=50)
    image: str
    type: str = Field(..., min_length=1, max_length=50)


class ExperienceCreate(ExperienceBase):
    """Schema for adding an experience to the catalog."""


class ExperienceResponse(ExperienceBase):
    """Schema for experience response."""

    id: str
