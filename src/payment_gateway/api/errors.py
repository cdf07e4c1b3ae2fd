"""Mapping of gateway errors to HTTP responses.

Every error leaves the API as one of a fixed set of response bodies; no stack
trace or internal detail is ever returned to the caller.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from payment_gateway.api.models import ErrorResponseJSON, PaymentResponseJSON
from payment_gateway.domain.exceptions import (
    BankUnavailable,
    MalformedRequestError,
    PaymentNotFound,
    PaymentRejected,
)

logger = structlog.get_logger(__name__)

NOT_FOUND_MESSAGE = "Not found"
BANK_UNAVAILABLE_MESSAGE = "Unable to process the request due to bank service issue"
INVALID_BODY_MESSAGE = "Invalid request body"
UNKNOWN_ERROR_MESSAGE = "Something went wrong"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseJSON(message=message).model_dump(),
    )


async def handle_payment_rejected(request: Request, exc: PaymentRejected) -> JSONResponse:
    logger.warning(
        "payment_request_rejected",
        path=request.url.path,
        fields=sorted({v.field for v in exc.violations}),
    )
    return JSONResponse(status_code=400, content=PaymentResponseJSON.rejected().to_json())


async def handle_malformed_request(
    request: Request, exc: MalformedRequestError
) -> JSONResponse:
    logger.warning("malformed_request_body", path=request.url.path, error=str(exc))
    return _error(400, INVALID_BODY_MESSAGE)


async def handle_payment_not_found(request: Request, exc: PaymentNotFound) -> JSONResponse:
    logger.warning("payment_not_found_response", path=request.url.path, error=str(exc))
    return _error(404, NOT_FOUND_MESSAGE)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.warning(
        "http_exception", path=request.url.path, status_code=exc.status_code
    )
    message = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
    return _error(exc.status_code, message)


async def handle_bank_unavailable(request: Request, exc: BankUnavailable) -> JSONResponse:
    logger.error("bank_unavailable", path=request.url.path, exc_info=exc)
    return _error(500, BANK_UNAVAILABLE_MESSAGE)


async def handle_unknown_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return _error(500, UNKNOWN_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-to-response mapping on an application."""
    app.add_exception_handler(PaymentRejected, handle_payment_rejected)
    app.add_exception_handler(MalformedRequestError, handle_malformed_request)
    app.add_exception_handler(PaymentNotFound, handle_payment_not_found)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(BankUnavailable, handle_bank_unavailable)
    app.add_exception_handler(Exception, handle_unknown_error)
