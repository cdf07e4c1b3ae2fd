"""
In-process acquiring bank simulator for local development.

Decisions depend on the last digit of the card number:

    odd digit       authorized, with a random authorization code
    even, non-zero  declined
    zero            bank unavailable (simulated 503)
"""

import uuid

import structlog

from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.domain.exceptions import BankUnavailable
from payment_gateway.domain.payment import AuthorizationRequest, AuthorizationResult

logger = structlog.get_logger(__name__)


class MockBankClient(AuthorizationClient):
    """Bank simulator that never leaves the process."""

    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        last_digit = request.card_number[-1:]
        card_last_four = request.card_number[-4:]

        if last_digit == "0":
            logger.warning("mock_bank_unavailable", card_last_four=card_last_four)
            raise BankUnavailable("Mock bank unavailable (status: 503)")

        if int(last_digit) % 2 == 1:
            authorization_code = str(uuid.uuid4())
            logger.info(
                "mock_bank_authorized",
                card_last_four=card_last_four,
                amount=request.amount,
            )
            return AuthorizationResult(
                authorized=True, authorization_code=authorization_code
            )

        logger.info(
            "mock_bank_declined",
            card_last_four=card_last_four,
            amount=request.amount,
        )
        return AuthorizationResult(authorized=False, authorization_code="")
