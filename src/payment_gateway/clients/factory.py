"""
Bank client factory.

Selects the acquiring bank integration from configuration so the gateway can
run against the real bank simulator over HTTP or against the in-process mock.
"""

import structlog

from payment_gateway.clients.bank_client import BankClient
from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.clients.mock_bank_client import MockBankClient
from payment_gateway.config import Settings

logger = structlog.get_logger(__name__)

BANK_CLIENT_TYPES = ("http", "mock")


def create_bank_client(settings: Settings) -> AuthorizationClient:
    """
    Create the bank client named by ``settings.bank_client_type``.

    Args:
        settings: Application settings

    Returns:
        AuthorizationClient ready to authorize payments

    Raises:
        ValueError: If the client type is not known
    """
    client_type = settings.bank_client_type.lower()

    if client_type == "http":
        client: AuthorizationClient = BankClient(
            base_url=settings.bank_base_url,
            timeout_seconds=settings.bank_timeout_seconds,
        )
    elif client_type == "mock":
        client = MockBankClient()
    else:
        available = ", ".join(BANK_CLIENT_TYPES)
        raise ValueError(
            f"Unknown bank client type: {settings.bank_client_type}. "
            f"Available types: {available}"
        )

    logger.info(
        "bank_client_created",
        bank_client_type=client_type,
        bank_client_class=type(client).__name__,
    )
    return client
