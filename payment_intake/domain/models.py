from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field, StrictStr, field_serializer, field_validator


def _require_json_number(value: Any) -> Any:
    # null decodes to the zero amount
    if value is None:
        return Decimal("0")
    # bool is an int subclass, but true/false is not an amount
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("amount must be a number")
    return value


def _null_as_empty(value: Any) -> Any:
    return "" if value is None else value


Amount = Annotated[Decimal, BeforeValidator(_require_json_number), Field(allow_inf_nan=False)]
Currency = Annotated[StrictStr, BeforeValidator(_null_as_empty)]


class PaymentStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class PaymentRequest(BaseModel):
    """Client payment request - what comes from API.

    Missing or null amount and currency fall back to zero values so the
    business rules report them, not the shape check.
    """
    amount: Amount = Decimal("0")
    currency: Currency = ""
    description: Optional[StrictStr] = None

    @field_validator("description")
    @classmethod
    def blank_description_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class Payment(BaseModel):
    """Payment record returned to clients, with server-assigned id and status."""
    id: str
    amount: Decimal
    currency: str
    status: PaymentStatus
    description: Optional[str] = None

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)


class HealthResponse(BaseModel):
    status: str
