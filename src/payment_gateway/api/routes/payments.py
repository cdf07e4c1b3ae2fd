"""Payment endpoints.

- POST /payment: Validate a card payment and submit it to the bank
- GET /payment/{payment_id}: Retrieve a previously processed payment
"""

import json
import uuid

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from payment_gateway.api.dependencies import PaymentSvc
from payment_gateway.api.models import PaymentResponseJSON, PostPaymentRequestJSON
from payment_gateway.domain.exceptions import MalformedRequestError, PaymentNotFound

logger = structlog.get_logger(__name__)

router = APIRouter()


def parse_payment_request(body: bytes) -> PostPaymentRequestJSON:
    """Parse a raw request body into the payment request model.

    Raises:
        MalformedRequestError: If the body is not JSON or has the wrong shape
    """
    try:
        json_data = json.loads(body)
        return PostPaymentRequestJSON.model_validate(json_data)
    except (ValueError, ValidationError) as e:
        raise MalformedRequestError(f"Invalid JSON request: {e}") from e


@router.post("/payment", response_model=PaymentResponseJSON)
async def post_payment(request: Request, payment_service: PaymentSvc) -> JSONResponse:
    """Process a card payment.

    Responses:
        200 OK: Payment Authorized or Declined by the bank
        400 Bad Request: Rejected by validation, or unreadable body
        500 Internal Server Error: Bank unavailable or unexpected error
    """
    body = await request.body()
    payment_request = parse_payment_request(body)

    logger.info(
        "payment_request_received",
        currency=payment_request.currency,
        amount=payment_request.amount,
    )

    payment = await payment_service.process_payment(payment_request.to_domain())

    return JSONResponse(
        status_code=200,
        content=PaymentResponseJSON.from_payment(payment).to_json(),
    )


@router.get("/payment/{payment_id}", response_model=PaymentResponseJSON)
async def get_payment(payment_id: str, payment_service: PaymentSvc) -> JSONResponse:
    """Retrieve a payment by ID.

    A malformed ID cannot match any payment, so it is reported as not found.
    """
    try:
        payment_uuid = uuid.UUID(payment_id)
    except ValueError as e:
        raise PaymentNotFound(f"Invalid payment ID {payment_id!r}") from e

    payment = payment_service.get_payment_by_id(payment_uuid)

    return JSONResponse(
        status_code=200,
        content=PaymentResponseJSON.from_payment(payment).to_json(),
    )
