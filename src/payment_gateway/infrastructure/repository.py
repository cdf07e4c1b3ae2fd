"""Repository layer for payment storage.

Payments are only ever created and read: there is no update or delete path.
The in-memory repository keeps records for the lifetime of the process.
"""

import threading
import uuid
from abc import ABC, abstractmethod
from typing import Optional

import structlog

from payment_gateway.domain.payment import Payment

logger = structlog.get_logger(__name__)


class PaymentRepository(ABC):
    """Storage interface for payment records."""

    @abstractmethod
    def put(self, payment: Payment) -> None:
        """Store a new payment keyed by its ID.

        Raises:
            ValueError: If a payment with the same ID is already stored
        """
        pass

    @abstractmethod
    def get(self, payment_id: uuid.UUID) -> Optional[Payment]:
        """Retrieve a payment by ID, or None if unknown."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored payments."""
        pass


class InMemoryPaymentRepository(PaymentRepository):
    """Thread-safe in-memory payment store.

    Every insert and read runs under a single lock, so any number of
    concurrent request handlers can share one instance.
    """

    def __init__(self) -> None:
        self._payments: dict[uuid.UUID, Payment] = {}
        self._lock = threading.Lock()

    def put(self, payment: Payment) -> None:
        with self._lock:
            if payment.id in self._payments:
                raise ValueError(f"Payment {payment.id} already exists")
            self._payments[payment.id] = payment

        logger.debug("payment_stored", payment_id=str(payment.id))

    def get(self, payment_id: uuid.UUID) -> Optional[Payment]:
        with self._lock:
            return self._payments.get(payment_id)

    def count(self) -> int:
        with self._lock:
            return len(self._payments)
