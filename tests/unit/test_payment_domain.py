"""Unit tests for payment domain models."""

import dataclasses
import uuid

import pytest

from payment_gateway.domain.payment import (
    AuthorizationRequest,
    AuthorizationResult,
    Payment,
    PaymentStatus,
    SupportedCurrency,
    ValidatedPaymentRequest,
)


@pytest.fixture
def validated_request():
    """A validated payment request."""
    return ValidatedPaymentRequest(
        card_number="12345678901234",
        expiry_month=4,
        expiry_year=2030,
        currency="GBP",
        amount=1050,
        cvv="123",
    )


class TestValidatedPaymentRequest:
    """Tests for ValidatedPaymentRequest."""

    def test_expiry_date_zero_pads_month(self, validated_request):
        """Test single-digit months are rendered with a leading zero."""
        assert validated_request.expiry_date == "04/2030"

    def test_expiry_date_two_digit_month(self, validated_request):
        """Test two-digit months are rendered as is."""
        request = dataclasses.replace(validated_request, expiry_month=11)

        assert request.expiry_date == "11/2030"

    def test_repr_hides_card_data(self, validated_request):
        """Test the full card number and CVV do not appear in repr."""
        text = repr(validated_request)

        assert "12345678901234" not in text
        assert "cvv" not in text


class TestAuthorizationRequest:
    """Tests for AuthorizationRequest."""

    def test_from_validated(self, validated_request):
        """Test the bank request is built from the validated request."""
        request = AuthorizationRequest.from_validated(validated_request)

        assert request.to_dict() == {
            "card_number": "12345678901234",
            "expiry_date": "04/2030",
            "currency": "GBP",
            "amount": 1050,
            "cvv": "123",
        }


class TestAuthorizationResult:
    """Tests for mapping bank decisions to payment status."""

    def test_authorized_maps_to_authorized(self):
        assert AuthorizationResult(authorized=True).status == PaymentStatus.AUTHORIZED

    def test_not_authorized_maps_to_declined(self):
        assert AuthorizationResult(authorized=False).status == PaymentStatus.DECLINED


class TestPayment:
    """Tests for the Payment record."""

    def test_create_copies_fields(self, validated_request):
        """Test Payment.create copies fields and keeps only the last four digits."""
        payment = Payment.create(validated_request, PaymentStatus.AUTHORIZED)

        assert isinstance(payment.id, uuid.UUID)
        assert payment.status == PaymentStatus.AUTHORIZED
        assert payment.card_number_last_four == "1234"
        assert payment.expiry_month == 4
        assert payment.expiry_year == 2030
        assert payment.currency == "GBP"
        assert payment.amount == 1050

    def test_create_never_keeps_card_number_or_cvv(self, validated_request):
        """Test the stored record has no full card number or CVV."""
        payment = Payment.create(validated_request, PaymentStatus.DECLINED)
        values = dataclasses.asdict(payment)

        assert "card_number" not in values
        assert "cvv" not in values
        assert "12345678901234" not in values.values()

    def test_create_generates_unique_ids(self, validated_request):
        """Test every created payment gets a new ID."""
        ids = {
            Payment.create(validated_request, PaymentStatus.AUTHORIZED).id
            for _ in range(100)
        }

        assert len(ids) == 100

    def test_payment_is_immutable(self, validated_request):
        """Test the status cannot be changed after creation."""
        payment = Payment.create(validated_request, PaymentStatus.AUTHORIZED)

        with pytest.raises(dataclasses.FrozenInstanceError):
            payment.status = PaymentStatus.DECLINED


class TestPaymentStatus:
    """Tests for PaymentStatus display names."""

    def test_display_names(self):
        assert PaymentStatus.AUTHORIZED.value == "Authorized"
        assert PaymentStatus.DECLINED.value == "Declined"
        assert PaymentStatus.REJECTED.value == "Rejected"


class TestSupportedCurrency:
    """Tests for the supported currency set."""

    def test_supported(self):
        assert SupportedCurrency.is_supported("USD")
        assert SupportedCurrency.is_supported("GBP")
        assert SupportedCurrency.is_supported("EUR")

    def test_unsupported(self):
        assert not SupportedCurrency.is_supported("ABC")
        assert not SupportedCurrency.is_supported("usd")
