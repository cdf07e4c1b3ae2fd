"""HTTP client for the acquiring bank."""

import uuid

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from payment_gateway.clients.base import AuthorizationClient
from payment_gateway.domain.exceptions import BankUnavailable
from payment_gateway.domain.payment import AuthorizationRequest, AuthorizationResult

logger = structlog.get_logger(__name__)

PAYMENT_API_PATH = "/payments"


class BankPaymentResponseJSON(BaseModel):
    """JSON body returned by the bank's payments endpoint."""

    authorized: bool
    authorization_code: str | None = None


class BankClient(AuthorizationClient):
    """
    Client for the acquiring bank's POST /payments endpoint.

    Each call is attempted exactly once. Any transport failure, error status
    or unreadable body is reported as BankUnavailable.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float | None = None,
    ):
        """
        Initialize the bank client.

        Args:
            base_url: Base URL of the bank (e.g., "http://localhost:8080")
            timeout_seconds: Request timeout in seconds. None disables the
                             timeout, so a stalled bank stalls the request.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.http_client = httpx.AsyncClient(timeout=timeout_seconds)

        logger.info(
            "bank_client_initialized",
            base_url=self.base_url,
            timeout_seconds=timeout_seconds,
        )

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        """
        Send an authorization request to the bank.

        Args:
            request: Authorization request

        Returns:
            AuthorizationResult parsed from the bank response

        Raises:
            BankUnavailable: On network errors, timeouts, non-2xx responses
                             or a response body that cannot be parsed
        """
        correlation_id = str(uuid.uuid4())
        url = f"{self.base_url}{PAYMENT_API_PATH}"

        logger.info(
            "bank_authorization_request",
            url=url,
            correlation_id=correlation_id,
            card_last_four=request.card_number[-4:],
            amount=request.amount,
            currency=request.currency,
        )

        try:
            response = await self.http_client.post(
                url,
                json=request.to_dict(),
                headers={"X-Request-ID": correlation_id},
            )
        except httpx.TimeoutException as e:
            logger.error(
                "bank_request_timeout",
                correlation_id=correlation_id,
                error=str(e),
            )
            raise BankUnavailable("Bank request timed out") from e
        except httpx.HTTPError as e:
            # Connection errors, protocol errors, etc.
            logger.error(
                "bank_request_error",
                correlation_id=correlation_id,
                error=str(e),
            )
            raise BankUnavailable(f"Bank request error: {e}") from e

        if not response.is_success:
            logger.error(
                "bank_error_response",
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            raise BankUnavailable(
                f"Bank returned an error (status: {response.status_code})"
            )

        try:
            body = BankPaymentResponseJSON.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                "bank_response_unreadable",
                correlation_id=correlation_id,
                error=str(e),
            )
            raise BankUnavailable("Bank returned an unreadable response") from e

        logger.info(
            "bank_authorization_response",
            correlation_id=correlation_id,
            authorized=body.authorized,
        )

        return AuthorizationResult(
            authorized=body.authorized,
            authorization_code=body.authorization_code,
        )
