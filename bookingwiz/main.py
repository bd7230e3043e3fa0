"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookingwiz.api.router import api_router
from bookingwiz.config import Settings, get_settings
from bookingwiz.core.exceptions import AppException, ValidationError
from bookingwiz.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from bookingwiz.gateways.base import PaymentGateway
from bookingwiz.gateways.mock import MockGateway
from bookingwiz.services.payment_service import PaymentService
from bookingwiz.storage.base import Storage
from bookingwiz.storage.memory import MemoryStorage
from bookingwiz.utils.validators import format_errors

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger("bookingwiz").setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(
        f"{settings.app_name} {settings.app_version} starting "
        f"({settings.environment}, {len(app.state.storage.get_all_experiences())} experiences)"
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_application(
    settings: Settings | None = None,
    storage: Storage | None = None,
    gateway: PaymentGateway | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings, defaults to the environment
        storage: Data store, a fresh in-memory store if omitted
        gateway: Payment gateway, the mock gateway if omitted

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="BookingWiz - Tour Booking API",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # One store per application, shared by every request
    storage = storage or MemoryStorage(reference_max_attempts=settings.reference_max_attempts)
    app.state.settings = settings
    app.state.storage = storage
    app.state.payment_service = PaymentService(
        storage=storage,
        gateway=gateway or MockGateway(),
        currency=settings.currency,
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle custom application exceptions."""
        content = {"message": exc.detail}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render framework HTTP errors (unknown routes, bad methods) as messages."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed request bodies like any other validation error."""
        return JSONResponse(
            status_code=400,
            content={"message": "Validation error", "errors": format_errors(exc.errors())},
        )

    # Middleware (order matters - first added = last executed)
    # 1. Security headers (outermost)
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=settings.environment == "production")

    # 2. Request logging
    app.add_middleware(RequestLoggingMiddleware, slow_request_seconds=settings.slow_request_seconds)

    # 3. CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 4. Gzip compression (innermost)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "bookingwiz.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug,
    )
