"""Pytest configuration and shared fixtures for bookingwiz tests."""

import random
from typing import Any

import pytest
from fastapi.testclient import TestClient

from bookingwiz.config import Settings
from bookingwiz.gateways.base import PaymentGateway
from bookingwiz.main import create_application
from bookingwiz.schemas.booking import BookingCreate
from bookingwiz.storage.memory import MemoryStorage


class SequenceRandom(random.Random):
    """Random source that replays fixed values from randrange."""

    def __init__(self, values: list[int]):
        super().__init__()
        self._values = iter(values)

    def randrange(self, *args: Any, **kwargs: Any) -> int:  # type: ignore[override]
        return next(self._values)


@pytest.fixture
def sequence_random() -> type[SequenceRandom]:
    return SequenceRandom


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="development", debug=True, log_level="WARNING")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def booking_payload() -> dict[str, Any]:
    """A valid booking body as the web client sends it."""
    return {
        "experienceId": "meditation-retreats",
        "checkinDate": "2025-01-01",
        "checkoutDate": "2025-01-03",
        "participants": 2,
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "phone": "123",
        "totalAmount": "240.00",
    }


@pytest.fixture
def booking_data(booking_payload: dict[str, Any]) -> BookingCreate:
    return BookingCreate.model_validate(booking_payload)


@pytest.fixture
def make_client(settings: Settings):
    """Build a test client around a given store and gateway."""

    def _make(storage: MemoryStorage | None = None, gateway: PaymentGateway | None = None) -> TestClient:
        app = create_application(settings=settings, storage=storage, gateway=gateway)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, storage: MemoryStorage) -> TestClient:
    return make_client(storage=storage)
