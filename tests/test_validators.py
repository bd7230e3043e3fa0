"""Tests for payload decoding and the booking schema rules."""

from decimal import Decimal

from bookingwiz.schemas.booking import BookingCreate
from bookingwiz.schemas.payment import PaymentConfirmRequest, PaymentIntentCreate
from bookingwiz.utils.validators import decode


def error_fields(result) -> set[str]:
    return {error["field"] for error in result.errors}


class TestDecodeBooking:
    """Tests for decode(BookingCreate, ...)."""

    def test_valid_payload(self, booking_payload: dict) -> None:
        """Should return a typed record and no errors."""
        result = decode(BookingCreate, booking_payload)

        assert result.ok
        assert result.value.participants == 2
        assert result.value.total_amount == Decimal("240.00")
        assert result.value.email == "a@b.com"

    def test_empty_payload_reports_every_required_field(self) -> None:
        """Should name every missing field, not just the first."""
        result = decode(BookingCreate, {})

        assert not result.ok
        assert result.value is None
        assert error_fields(result) == {
            "experienceId",
            "checkinDate",
            "checkoutDate",
            "participants",
            "firstName",
            "lastName",
            "email",
            "phone",
            "totalAmount",
        }

    def test_missing_email_reported_with_other_errors(self, booking_payload: dict) -> None:
        del booking_payload["email"]
        booking_payload["participants"] = 0

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"email", "participants"}

    def test_malformed_email(self, booking_payload: dict) -> None:
        booking_payload["email"] = "not-an-email"

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"email"}
        assert result.errors[0]["message"]

    def test_email_is_kept_as_sent(self, booking_payload: dict) -> None:
        booking_payload["email"] = "Guest@Example.COM"

        result = decode(BookingCreate, booking_payload)

        assert result.value.email == "Guest@Example.COM"

    def test_blank_names_are_rejected(self, booking_payload: dict) -> None:
        booking_payload["firstName"] = "   "
        booking_payload["lastName"] = ""

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"firstName", "lastName"}

    def test_participants_must_be_integer(self, booking_payload: dict) -> None:
        booking_payload["participants"] = 2.5

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"participants"}

    def test_amount_is_normalized_to_cents(self, booking_payload: dict) -> None:
        booking_payload["totalAmount"] = 240

        result = decode(BookingCreate, booking_payload)

        assert str(result.value.total_amount) == "240.00"

    def test_over_precise_amount_is_rounded(self, booking_payload: dict) -> None:
        """Should accept float arithmetic noise and round it to cents."""
        booking_payload["totalAmount"] = "59.970000000000006"

        result = decode(BookingCreate, booking_payload)

        assert result.ok
        assert str(result.value.total_amount) == "59.97"

    def test_amount_rounds_half_up(self, booking_payload: dict) -> None:
        booking_payload["totalAmount"] = "0.125"

        result = decode(BookingCreate, booking_payload)

        assert str(result.value.total_amount) == "0.13"

    def test_huge_amount_is_rejected(self, booking_payload: dict) -> None:
        booking_payload["totalAmount"] = "1000000000"

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"totalAmount"}

    def test_negative_amount_is_rejected(self, booking_payload: dict) -> None:
        booking_payload["totalAmount"] = "-1.00"

        result = decode(BookingCreate, booking_payload)

        assert error_fields(result) == {"totalAmount"}

    def test_empty_special_requests_become_none(self, booking_payload: dict) -> None:
        booking_payload["specialRequests"] = ""

        result = decode(BookingCreate, booking_payload)

        assert result.value.special_requests is None

    def test_server_assigned_fields_are_ignored(self, booking_payload: dict) -> None:
        booking_payload.update(
            id="forged",
            referenceNumber="SM-1999-000001",
            paymentStatus="completed",
            paymentIntentId="pi_forged",
        )

        result = decode(BookingCreate, booking_payload)

        assert result.ok
        assert "payment_status" not in result.value.model_dump()

    def test_snake_case_keys_are_accepted(self) -> None:
        result = decode(
            BookingCreate,
            {
                "experience_id": "sunrise-tours",
                "checkin_date": "2025-03-01",
                "checkout_date": "2025-03-02",
                "participants": 1,
                "first_name": "Dawa",
                "last_name": "Lama",
                "email": "dawa@example.com",
                "phone": "555",
                "total_amount": "60.00",
            },
        )

        assert result.ok
        assert result.value.experience_id == "sunrise-tours"

    def test_non_object_payload(self) -> None:
        result = decode(BookingCreate, ["not", "an", "object"])

        assert error_fields(result) == {"body"}


class TestDecodePayments:
    """Tests for decoding payment request bodies."""

    def test_zero_amount_is_rejected(self) -> None:
        result = decode(PaymentIntentCreate, {"amount": 0})

        assert error_fields(result) == {"amount"}

    def test_booking_id_is_optional(self) -> None:
        result = decode(PaymentIntentCreate, {"amount": 240})

        assert result.ok
        assert result.value.booking_id is None

    def test_malformed_booking_id_is_ignored(self) -> None:
        """Should decode a valid amount even when bookingId is not a string."""
        result = decode(PaymentIntentCreate, {"amount": 10, "bookingId": 123})

        assert result.ok
        assert result.value.amount == Decimal("10")
        assert result.value.booking_id is None

    def test_confirm_requires_both_ids(self) -> None:
        result = decode(PaymentConfirmRequest, {})

        assert error_fields(result) == {"paymentIntentId", "bookingId"}
