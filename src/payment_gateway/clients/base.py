"""Base interface for acquiring bank clients."""

from abc import ABC, abstractmethod

from payment_gateway.domain.payment import AuthorizationRequest, AuthorizationResult


class AuthorizationClient(ABC):
    """
    Abstract base class for acquiring bank integrations.

    The payment service depends only on this interface, so the HTTP client
    and the in-process simulator are interchangeable.
    """

    @abstractmethod
    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        """
        Ask the bank to authorize a payment.

        Args:
            request: Authorization request built from a validated payment

        Returns:
            AuthorizationResult with the bank's decision. A decline is a
            normal result, not an exception.

        Raises:
            BankUnavailable: The bank could not be reached or answered with
                             an error.
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
