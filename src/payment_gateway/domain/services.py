"""Domain services for payment processing.

``PaymentGatewayService`` drives a payment end to end:

1. Validate the request (reject locally on any violation)
2. Build the bank authorization request
3. Call the bank exactly once
4. Map the bank decision to a payment status
5. Store and return the payment

Collaborators are passed to the constructor so the bank integration and the
store can be swapped without touching this module.
"""

import uuid
from datetime import datetime
from typing import Callable, Optional

import structlog

from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.domain.exceptions import (
    PaymentNotFound,
    PaymentRejected,
    PaymentValidationError,
)
from payment_gateway.domain.payment import (
    AuthorizationRequest,
    Payment,
    PaymentRequest,
)
from payment_gateway.domain.validation import validate_payment_request
from payment_gateway.infrastructure.repository import PaymentRepository

logger = structlog.get_logger(__name__)


class PaymentGatewayService:
    """Domain service for processing and retrieving payments."""

    def __init__(
        self,
        bank_client: AuthorizationClient,
        repository: PaymentRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            bank_client: Acquiring bank integration
            repository: Payment store
            clock: Optional time source for the expiry check (defaults to UTC now)
        """
        self.bank_client = bank_client
        self.repository = repository
        self.clock = clock

    async def process_payment(self, request: PaymentRequest) -> Payment:
        """Validate, authorize and store a payment.

        Args:
            request: Inbound payment request

        Returns:
            Stored Payment with status Authorized or Declined

        Raises:
            PaymentRejected: Request failed validation; nothing is stored and
                             the bank is not called
            BankUnavailable: Bank call failed; nothing is stored
        """
        now = self.clock() if self.clock else None

        try:
            validated = validate_payment_request(request, now=now)
        except PaymentValidationError as e:
            logger.warning(
                "payment_rejected",
                violations=[f"{v.field}:{v.rule}" for v in e.violations],
            )
            raise PaymentRejected(e.violations) from e

        authorization_request = AuthorizationRequest.from_validated(validated)

        logger.info(
            "payment_authorization_started",
            card_last_four=validated.card_number_last_four,
            amount=validated.amount,
            currency=validated.currency,
        )

        result = await self.bank_client.authorize(authorization_request)

        payment = Payment.create(validated, result.status)
        self.repository.put(payment)

        logger.info(
            "payment_processed",
            payment_id=str(payment.id),
            status=payment.status.value,
        )

        return payment

    def get_payment_by_id(self, payment_id: uuid.UUID) -> Payment:
        """Look up a stored payment.

        Args:
            payment_id: Payment identifier

        Returns:
            The stored Payment, unchanged

        Raises:
            PaymentNotFound: If no payment has this ID
        """
        logger.debug("payment_lookup", payment_id=str(payment_id))

        payment = self.repository.get(payment_id)
        if payment is None:
            logger.warning("payment_not_found", payment_id=str(payment_id))
            raise PaymentNotFound(f"Payment {payment_id} not found")

        return payment
