"""Unit tests for operational endpoints."""

import asyncio

from payment_gateway.api.routes.health import root


def test_health_check(client):
    """Test health check returns service information."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "payment-gateway"
    assert "environment" in response.json()


def test_root_endpoint():
    """Test root endpoint returns service information."""
    result = asyncio.run(root())

    assert result["service"] == "Payment Gateway"
    assert result["version"] == "0.1.0"
    assert result["status"] == "running"
