"""Domain layer for Payment Gateway."""

from payment_gateway.domain.exceptions import (
    BankUnavailable,
    MalformedRequestError,
    PaymentGatewayError,
    PaymentNotFound,
    PaymentRejected,
    PaymentValidationError,
)
from payment_gateway.domain.payment import (
    AuthorizationRequest,
    AuthorizationResult,
    Payment,
    PaymentRequest,
    PaymentStatus,
    SupportedCurrency,
    ValidatedPaymentRequest,
    Violation,
)

__all__ = [
    "AuthorizationRequest",
    "AuthorizationResult",
    "BankUnavailable",
    "MalformedRequestError",
    "Payment",
    "PaymentGatewayError",
    "PaymentNotFound",
    "PaymentRejected",
    "PaymentRequest",
    "PaymentStatus",
    "PaymentValidationError",
    "SupportedCurrency",
    "ValidatedPaymentRequest",
    "Violation",
]
