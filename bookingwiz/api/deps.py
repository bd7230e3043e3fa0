"""API dependencies for shared application state."""

from typing import Annotated

from fastapi import Depends, Request

from bookingwiz.services.payment_service import PaymentService
from bookingwiz.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """Data store shared by every request of this application."""
    return request.app.state.storage


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


StorageDep = Annotated[Storage, Depends(get_storage)]
PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]
