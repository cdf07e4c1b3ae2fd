"""Custom exceptions for Payment Gateway."""

from payment_gateway.domain.payment import Violation


class PaymentGatewayError(Exception):
    """Base exception for gateway errors."""

    pass


class PaymentValidationError(PaymentGatewayError):
    """Raised when a payment request breaks one or more field rules."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        fields = ", ".join(sorted({v.field for v in self.violations}))
        super().__init__(f"Invalid payment request: {fields}")


class PaymentRejected(PaymentGatewayError):
    """
    Raised when a payment is rejected before reaching the bank.

    No payment record is created and the bank is never called.
    """

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        super().__init__(f"Payment rejected with {len(self.violations)} violation(s)")


class BankUnavailable(PaymentGatewayError):
    """
    Raised when the acquiring bank cannot be reached or answers with an error.

    Never retried and never downgraded to a decline.
    """

    pass


class PaymentNotFound(PaymentGatewayError):
    """Raised when no payment exists for the requested ID."""

    pass


class MalformedRequestError(PaymentGatewayError):
    """Raised when a request body cannot be read into a payment request."""

    pass
