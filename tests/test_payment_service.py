"""Tests for the payment service and gateways."""

import asyncio
from decimal import Decimal

import pytest

from bookingwiz.core.exceptions import NotFoundError, PaymentError
from bookingwiz.domain.payment_state import PaymentStatus, status_for_outcome
from bookingwiz.gateways.base import GatewayType, OutcomeStatus, PaymentIntent, PaymentOutcome
from bookingwiz.gateways.mock import MockGateway
from bookingwiz.schemas.booking import BookingCreate
from bookingwiz.services.payment_service import PaymentService
from bookingwiz.storage.memory import MemoryStorage


class DecliningGateway(MockGateway):
    """Gateway whose attempts are always declined."""

    async def attempt(self, intent: PaymentIntent) -> PaymentOutcome:
        return PaymentOutcome(
            status=OutcomeStatus.DECLINED,
            payment_intent_id=intent.id,
            error_message="Card declined",
        )


@pytest.fixture
def service(storage: MemoryStorage) -> PaymentService:
    return PaymentService(storage=storage, gateway=MockGateway())


class TestMockGateway:
    def test_gateway_type(self) -> None:
        assert MockGateway().gateway_type == GatewayType.MOCK

    def test_intent_ids_are_time_stamped(self) -> None:
        intent = asyncio.run(MockGateway().create_intent(Decimal("10.00"), "usd"))

        assert intent.id.startswith("pi_mock_")
        assert intent.id.removeprefix("pi_mock_").isdigit()
        assert intent.client_secret == f"{intent.id}_secret_mock"

    def test_attempt_always_succeeds(self) -> None:
        intent = PaymentIntent(id="pi_mock_1", amount=Decimal("10.00"), currency="usd")

        outcome = asyncio.run(MockGateway().attempt(intent))

        assert outcome.success
        assert outcome.status == OutcomeStatus.SUCCEEDED
        assert outcome.payment_intent_id == "pi_mock_1"


class TestOutcomeStatus:
    def test_mapping(self) -> None:
        assert status_for_outcome("succeeded") == PaymentStatus.COMPLETED
        assert status_for_outcome("declined") == PaymentStatus.FAILED

    def test_unknown_outcome(self) -> None:
        with pytest.raises(ValueError):
            status_for_outcome("refunded")


class TestCreateIntent:
    """Tests for PaymentService.create_intent()."""

    def test_marks_booking_processing(
        self, service: PaymentService, storage: MemoryStorage, booking_data: BookingCreate
    ) -> None:
        booking = storage.create_booking(booking_data)

        intent = asyncio.run(service.create_intent(Decimal("240.00"), booking.id))

        stored = storage.get_booking(booking.id)
        assert stored.payment_status == PaymentStatus.PROCESSING
        assert stored.payment_intent_id == intent.id
        assert intent.currency == "usd"

    def test_without_booking(self, service: PaymentService) -> None:
        intent = asyncio.run(service.create_intent(Decimal("10.00")))

        assert intent.id.startswith("pi_mock_")
        assert intent.booking_id is None

    def test_unknown_booking_is_ignored(self, service: PaymentService) -> None:
        intent = asyncio.run(service.create_intent(Decimal("10.00"), "missing"))

        assert intent.booking_id == "missing"


class TestConfirm:
    """Tests for PaymentService.confirm()."""

    def test_success_completes_booking(
        self, service: PaymentService, storage: MemoryStorage, booking_data: BookingCreate
    ) -> None:
        booking = storage.create_booking(booking_data)

        outcome, updated = asyncio.run(service.confirm("pi_mock_42", booking.id))

        assert outcome.success
        assert updated.payment_status == PaymentStatus.COMPLETED
        assert updated.payment_intent_id == "pi_mock_42"
        assert storage.get_booking(booking.id) == updated

    def test_unknown_booking(self, service: PaymentService) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(service.confirm("pi_mock_42", "missing"))

    def test_declined_payment_fails_booking(self, storage: MemoryStorage, booking_data: BookingCreate) -> None:
        """Should record the failure before raising."""
        service = PaymentService(storage=storage, gateway=DecliningGateway())
        booking = storage.create_booking(booking_data)

        with pytest.raises(PaymentError) as exc_info:
            asyncio.run(service.confirm("pi_mock_42", booking.id))

        assert exc_info.value.detail == "Card declined"
        assert storage.get_booking(booking.id).payment_status == PaymentStatus.FAILED
