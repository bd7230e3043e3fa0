"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from bookingwiz.api.routes import bookings, experiences, payments

api_router = APIRouter()

# Experiences
api_router.include_router(experiences.router, prefix="/experiences", tags=["Experiences"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Payments
api_router.include_router(payments.router, tags=["Payments"])
