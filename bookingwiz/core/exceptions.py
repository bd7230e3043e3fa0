"""Custom application exceptions."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(AppException):
    """Validation error exception."""

    def __init__(self, detail: str = "Validation error", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class PaymentError(AppException):
    """Payment processing error."""

    def __init__(self, detail: str = "Payment processing failed") -> None:
        super().__init__(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=detail)


class InternalError(AppException):
    """Unexpected failure surfaced at the API boundary."""

    def __init__(self, detail: str = "An unexpected error occurred") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ReferenceNumberExhausted(RuntimeError):
    """No free booking reference number could be generated."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"No unique reference number after {attempts} attempts")


@contextmanager
def internal_errors(action: str) -> Iterator[None]:
    """Convert unexpected exceptions into an InternalError.

    Application exceptions pass through untouched so their status codes survive.

    Args:
        action: Phrase describing the operation, e.g. "creating booking"
    """
    try:
        yield
    except AppException:
        raise
    except Exception as e:
        logger.exception(f"Error {action}")
        raise InternalError(f"Error {action}: {e}") from e
