"""Domain models for card payments.

This module contains the payment value objects exchanged between the API
layer, the validator, the bank clients and the payment store. Everything here
is immutable: a payment's status is fixed when it is created.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PaymentStatus(str, Enum):
    """Payment outcome, serialized as its display name."""

    AUTHORIZED = "Authorized"
    DECLINED = "Declined"
    REJECTED = "Rejected"


class SupportedCurrency(str, Enum):
    """ISO 4217 currencies accepted by the gateway."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"

    @classmethod
    def is_supported(cls, code: str) -> bool:
        return code in {currency.value for currency in cls}


@dataclass(frozen=True)
class Violation:
    """A single broken validation rule.

    Attributes:
        field: Request field name, or "expiry_date" for the expiry rule
        rule: Machine-readable rule code
        message: Human-readable description
    """

    field: str
    rule: str
    message: str


@dataclass(frozen=True)
class PaymentRequest:
    """Inbound payment request as received from the merchant (untrusted).

    Any field may be missing.
    """

    card_number: Optional[str] = field(default=None, repr=False)
    expiry_month: Optional[int] = None
    expiry_year: Optional[int] = None
    currency: Optional[str] = None
    amount: Optional[int] = None
    cvv: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class ValidatedPaymentRequest:
    """Payment request that passed every validation rule.

    Only built by ``validate_payment_request``.
    """

    card_number: str = field(repr=False)
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int
    cvv: str = field(repr=False)

    @property
    def expiry_date(self) -> str:
        """Expiry rendered as MM/YYYY."""
        return f"{self.expiry_month:02d}/{self.expiry_year:04d}"

    @property
    def card_number_last_four(self) -> str:
        return self.card_number[-4:]


@dataclass(frozen=True)
class AuthorizationRequest:
    """Request sent to the acquiring bank."""

    card_number: str = field(repr=False)
    expiry_date: str
    currency: str
    amount: int
    cvv: str = field(repr=False)

    @classmethod
    def from_validated(cls, request: ValidatedPaymentRequest) -> "AuthorizationRequest":
        return cls(
            card_number=request.card_number,
            expiry_date=request.expiry_date,
            currency=request.currency,
            amount=request.amount,
            cvv=request.cvv,
        )

    def to_dict(self) -> dict:
        """Wire representation expected by the bank."""
        return {
            "card_number": self.card_number,
            "expiry_date": self.expiry_date,
            "currency": self.currency,
            "amount": self.amount,
            "cvv": self.cvv,
        }


@dataclass(frozen=True)
class AuthorizationResult:
    """Bank decision for a single authorization request."""

    authorized: bool
    authorization_code: Optional[str] = None

    @property
    def status(self) -> PaymentStatus:
        return PaymentStatus.AUTHORIZED if self.authorized else PaymentStatus.DECLINED


@dataclass(frozen=True)
class Payment:
    """Stored payment record.

    Holds only the last four card digits; the full card number and the CVV
    are never kept.

    Attributes:
        id: Unique payment identifier, generated at creation
        status: Outcome of the payment
        card_number_last_four: Last 4 digits of the card number
        expiry_month: Card expiry month (1-12)
        expiry_year: Card expiry year
        currency: ISO 4217 currency code
        amount: Amount in minor currency units
    """

    id: uuid.UUID
    status: PaymentStatus
    card_number_last_four: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int

    @classmethod
    def create(
        cls, request: ValidatedPaymentRequest, status: PaymentStatus
    ) -> "Payment":
        """Create a new payment with a freshly generated ID.

        Args:
            request: Validated payment request
            status: Outcome to record

        Returns:
            New Payment instance
        """
        return cls(
            id=uuid.uuid4(),
            status=status,
            card_number_last_four=request.card_number_last_four,
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            currency=request.currency,
            amount=request.amount,
        )
