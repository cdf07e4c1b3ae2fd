"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from payment_gateway.domain.services import PaymentGatewayService


def get_payment_service(request: Request) -> PaymentGatewayService:
    """Provide the payment service built at application startup.

    Returns:
        PaymentGatewayService instance stored on the application state
    """
    return request.app.state.payment_service


# Type alias for payment service dependency
PaymentSvc = Annotated[PaymentGatewayService, Depends(get_payment_service)]
