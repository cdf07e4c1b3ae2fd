"""FastAPI application entry point for Payment Gateway."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import structlog
from fastapi import FastAPI

from payment_gateway import __version__
from payment_gateway.api.errors import register_exception_handlers
from payment_gateway.api.routes.health import router as health_router
from payment_gateway.api.routes.payments import router as payments_router
from payment_gateway.clients.factory import create_bank_client
from payment_gateway.config import settings
from payment_gateway.domain.services import PaymentGatewayService
from payment_gateway.infrastructure.repository import InMemoryPaymentRepository
from payment_gateway.logging_config import configure_logging

# Configure logging at module level
configure_logging()

logger = structlog.get_logger()


def create_app(payment_service: Optional[PaymentGatewayService] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        payment_service: Pre-built service to use. When omitted, the service is
                         built at startup from settings with an in-memory store.

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("starting_payment_gateway", environment=settings.environment)

        bank_client = None
        if payment_service is None:
            bank_client = create_bank_client(settings)
            app.state.payment_service = PaymentGatewayService(
                bank_client=bank_client,
                repository=InMemoryPaymentRepository(),
            )

        logger.info("payment_gateway_started")

        yield

        logger.info("shutting_down_payment_gateway")
        if bank_client is not None:
            await bank_client.close()
        logger.info("payment_gateway_shutdown_complete")

    app = FastAPI(
        title="Payment Gateway",
        description="Card payment gateway in front of an acquiring bank",
        version=__version__,
        lifespan=lifespan,
    )

    if payment_service is not None:
        app.state.payment_service = payment_service

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(payments_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "payment_gateway.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
