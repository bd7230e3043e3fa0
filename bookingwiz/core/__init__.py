"""Core utilities: exceptions and middleware."""

from bookingwiz.core.exceptions import (
    AppException,
    InternalError,
    NotFoundError,
    PaymentError,
    ReferenceNumberExhausted,
    ValidationError,
    internal_errors,
)

__all__ = [
    "AppException",
    "InternalError",
    "NotFoundError",
    "PaymentError",
    "ReferenceNumberExhausted",
    "ValidationError",
    "internal_errors",
]
