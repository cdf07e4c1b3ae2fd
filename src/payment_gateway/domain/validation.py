"""Validation rules for inbound payment requests.

Validation is pure: it never mutates the request and performs no I/O. Every
broken rule is reported as a ``Violation`` so the caller sees all problems at
once rather than the first one.

Field rules:
    card_number   14-19 ASCII digits
    expiry_month  integer between 1 and 12
    expiry_year   integer between 1 and 9999
    currency      3 uppercase ASCII letters, and a supported currency
    amount        strictly positive integer
    cvv           3 or 4 ASCII digits

Cross-field rule:
    (expiry_year, expiry_month) must be strictly after the current month.
    Skipped when either part is missing.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

from payment_gateway.domain.exceptions import PaymentValidationError
from payment_gateway.domain.payment import (
    PaymentRequest,
    SupportedCurrency,
    ValidatedPaymentRequest,
    Violation,
)

CARD_NUMBER_PATTERN = re.compile(r"[0-9]{14,19}")
CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")
CVV_PATTERN = re.compile(r"[0-9]{3,4}")

EXPIRY_FIELD = "expiry_date"

REQUIRED_FIELDS = (
    "card_number",
    "expiry_month",
    "expiry_year",
    "currency",
    "amount",
    "cvv",
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def _check_expiry_in_future(
    expiry_year: int, expiry_month: int, now: datetime
) -> Optional[Violation]:
    """Check that the expiry month lies strictly after the current month.

    A month outside 1-12 has no calendar meaning and breaks this rule too.
    """
    violation = Violation(
        field=EXPIRY_FIELD,
        rule="expiry_in_future",
        message="Expiry year and month must be valid and in the future",
    )
    if not (_is_int(expiry_year) and _is_int(expiry_month)):
        return violation
    if not 1 <= expiry_month <= 12:
        return violation
    if (expiry_year, expiry_month) <= (now.year, now.month):
        return violation
    return None


def collect_violations(
    request: PaymentRequest, now: Optional[datetime] = None
) -> list[Violation]:
    """Check a payment request against every validation rule.

    Args:
        request: Inbound payment request
        now: Reference time for the expiry check (defaults to current UTC time)

    Returns:
        List of violations, empty if the request is valid
    """
    if now is None:
        now = datetime.now(timezone.utc)

    violations: list[Violation] = []

    for name in REQUIRED_FIELDS:
        if getattr(request, name) is None:
            violations.append(
                Violation(field=name, rule="required", message=f"{name} is required")
            )

    card_number = request.card_number
    if card_number is not None and not _matches(CARD_NUMBER_PATTERN, card_number):
        violations.append(
            Violation(
                field="card_number",
                rule="format",
                message="Card number must be between 14 and 19 digits",
            )
        )

    expiry_month = request.expiry_month
    if expiry_month is not None and not (_is_int(expiry_month) and 1 <= expiry_month <= 12):
        violations.append(
            Violation(
                field="expiry_month",
                rule="range",
                message="Expiry month must be between 1 and 12",
            )
        )

    expiry_year = request.expiry_year
    if expiry_year is not None and not (_is_int(expiry_year) and 1 <= expiry_year <= 9999):
        violations.append(
            Violation(
                field="expiry_year",
                rule="range",
                message="Expiry year must be between 1 and 9999",
            )
        )

    currency = request.currency
    if currency is not None:
        if not _matches(CURRENCY_PATTERN, currency):
            violations.append(
                Violation(
                    field="currency",
                    rule="format",
                    message="Currency must be a 3 letter code",
                )
            )
        elif not SupportedCurrency.is_supported(currency):
            violations.append(
                Violation(
                    field="currency",
                    rule="supported_currency",
                    message="Currency code is not supported",
                )
            )

    amount = request.amount
    if amount is not None and not (_is_int(amount) and amount > 0):
        violations.append(
            Violation(
                field="amount",
                rule="positive",
                message="Amount must be a positive integer",
            )
        )

    cvv = request.cvv
    if cvv is not None and not _matches(CVV_PATTERN, cvv):
        violations.append(
            Violation(
                field="cvv",
                rule="format",
                message="CVV must be a 3 or 4 digit number",
            )
        )

    # Missing year or month is already reported as required
    if expiry_year is not None and expiry_month is not None:
        expiry_violation = _check_expiry_in_future(expiry_year, expiry_month, now)
        if expiry_violation is not None:
            violations.append(expiry_violation)

    return violations


def validate_payment_request(
    request: PaymentRequest, now: Optional[datetime] = None
) -> ValidatedPaymentRequest:
    """Validate a payment request.

    Args:
        request: Inbound payment request
        now: Reference time for the expiry check (defaults to current UTC time)

    Returns:
        ValidatedPaymentRequest carrying all six fields

    Raises:
        PaymentValidationError: If any rule is broken
    """
    violations = collect_violations(request, now=now)
    if violations:
        raise PaymentValidationError(violations)

    return ValidatedPaymentRequest(
        card_number=request.card_number,
        expiry_month=request.expiry_month,
        expiry_year=request.expiry_year,
        currency=request.currency,
        amount=request.amount,
        cvv=request.cvv,
    )
