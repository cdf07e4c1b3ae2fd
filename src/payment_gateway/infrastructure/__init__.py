"""Infrastructure layer for Payment Gateway."""

from payment_gateway.infrastructure.repository import (
    InMemoryPaymentRepository,
    PaymentRepository,
)

__all__ = ["InMemoryPaymentRepository", "PaymentRepository"]
