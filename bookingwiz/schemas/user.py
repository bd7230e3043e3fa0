"""User-related Pydantic schemas."""

from pydantic import Field

from bookingwiz.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Schema for creating a user record."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
