"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Sample payment requests
- A fixed reference time for expiry checks
- Mock bank client and in-memory repository
- A payment service and HTTP test client wired together
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from payment_gateway.api.main import create_app
from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.domain.payment import AuthorizationResult, PaymentRequest
from payment_gateway.domain.services import PaymentGatewayService
from payment_gateway.infrastructure.repository import InMemoryPaymentRepository


@pytest.fixture
def fixed_now():
    """Reference time used for expiry validation."""
    return datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def valid_payment_request():
    """A payment request that passes every validation rule."""
    return PaymentRequest(
        card_number="12345678901235",
        expiry_month=12,
        expiry_year=2099,
        currency="USD",
        amount=1000,
        cvv="123",
    )


@pytest.fixture
def valid_payment_body():
    """JSON body for a valid POST /payment request."""
    return {
        "card_number": "12345678901235",
        "expiry_month": 12,
        "expiry_year": 2099,
        "currency": "USD",
        "amount": 1000,
        "cvv": "123",
    }


@pytest.fixture
def bank_client():
    """Mock bank client that authorizes by default."""
    client = AsyncMock(spec=AuthorizationClient)
    client.authorize.return_value = AuthorizationResult(
        authorized=True, authorization_code="xxx"
    )
    return client


@pytest.fixture
def repository():
    """Empty in-memory payment repository."""
    return InMemoryPaymentRepository()


@pytest.fixture
def payment_service(bank_client, repository, fixed_now):
    """Payment service wired to the mock bank and in-memory repository."""
    return PaymentGatewayService(
        bank_client=bank_client,
        repository=repository,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def client(payment_service):
    """HTTP test client for an app using the test payment service."""
    app = create_app(payment_service=payment_service)
    return TestClient(app, raise_server_exceptions=False)
