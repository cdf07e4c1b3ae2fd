"""Pydantic models for JSON API requests/responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from payment_gateway.domain.payment import Payment, PaymentRequest, PaymentStatus

INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1


class PostPaymentRequestJSON(BaseModel):
    """JSON request model for submitting a card payment.

    Every field is optional here: a missing field is a validation failure
    (Rejected), not a malformed body.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "card_number": "2222405343248877",
                "expiry_month": 4,
                "expiry_year": 2030,
                "currency": "GBP",
                "amount": 100,
                "cvv": "123",
            }
        }
    )

    card_number: Optional[str] = Field(None, description="Card number (14-19 digits)")
    expiry_month: Optional[int] = Field(
        None, ge=-INT32_MAX - 1, le=INT32_MAX, description="Expiry month (1-12)"
    )
    expiry_year: Optional[int] = Field(
        None, ge=-INT32_MAX - 1, le=INT32_MAX, description="Expiry year"
    )
    currency: Optional[str] = Field(None, description="ISO 4217 currency code")
    amount: Optional[int] = Field(
        None,
        ge=-INT64_MAX - 1,
        le=INT64_MAX,
        description="Amount in minor currency units",
    )
    cvv: Optional[str] = Field(None, description="Card verification value (3-4 digits)")

    @field_validator("expiry_month", "expiry_year", "amount", mode="before")
    @classmethod
    def reject_booleans(cls, v):
        if isinstance(v, bool):
            raise ValueError("Expected an integer, got a boolean")
        return v

    def to_domain(self) -> PaymentRequest:
        return PaymentRequest(
            card_number=self.card_number,
            expiry_month=self.expiry_month,
            expiry_year=self.expiry_year,
            currency=self.currency,
            amount=self.amount,
            cvv=self.cvv,
        )


class PaymentResponseJSON(BaseModel):
    """JSON representation of a payment.

    A rejected payment only carries its status.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "87654321-4321-8765-4321-876543218765",
                "status": "Authorized",
                "cardNumberLastFour": "8877",
                "expiryMonth": 4,
                "expiryYear": 2030,
                "currency": "GBP",
                "amount": 100,
            }
        },
    )

    id: Optional[str] = Field(None, description="Payment ID")
    status: PaymentStatus = Field(..., description="Authorized, Declined or Rejected")
    card_number_last_four: Optional[str] = Field(None, alias="cardNumberLastFour")
    expiry_month: Optional[int] = Field(None, alias="expiryMonth")
    expiry_year: Optional[int] = Field(None, alias="expiryYear")
    currency: Optional[str] = None
    amount: Optional[int] = None

    @classmethod
    def from_payment(cls, payment: Payment) -> "PaymentResponseJSON":
        return cls(
            id=str(payment.id),
            status=payment.status,
            card_number_last_four=payment.card_number_last_four,
            expiry_month=payment.expiry_month,
            expiry_year=payment.expiry_year,
            currency=payment.currency,
            amount=payment.amount,
        )

    @classmethod
    def rejected(cls) -> "PaymentResponseJSON":
        return cls(status=PaymentStatus.REJECTED)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorResponseJSON(BaseModel):
    """JSON body for error responses."""

    message: str
