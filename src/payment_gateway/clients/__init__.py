"""Acquiring bank clients."""

from payment_gateway.clients.bank_client import BankClient
from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.clients.factory import create_bank_client
from payment_gateway.clients.mock_bank_client import MockBankClient

__all__ = [
    "AuthorizationClient",
    "BankClient",
    "MockBankClient",
    "create_bank_client",
]
