from decimal import Decimal
import json
import logging

from payment_intake.domain.models import Payment, PaymentRequest, PaymentStatus
from payment_intake.domain.protocols import IdGenerator

logger = logging.getLogger(__name__)

# Custom exceptions
class PaymentError(Exception):
    """Base class for request failures that map to a fixed HTTP response."""
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

class MethodNotAllowedError(PaymentError):
    """Raised when an endpoint is called with the wrong HTTP verb."""
    status_code = 405
    message = "Invalid method"

class MalformedInputError(PaymentError):
    """Raised when the body is not valid JSON or does not match the payment shape."""
    message = "Invalid JSON"

class InvalidAmountError(PaymentError):
    """Raised when the amount is zero or negative."""
    message = "Amount must be positive"

class MissingCurrencyError(PaymentError):
    """Raised when the currency is empty."""
    message = "Currency is required"


MOCK_PAYMENT = Payment(
    id="pay_12345",
    amount=Decimal("1000.50"),
    currency="RUB",
    status=PaymentStatus.SUCCEEDED,
)


def validate_payment_request(payment_request: PaymentRequest) -> None:
    """Apply the business rules in order, stopping at the first failure."""
    if payment_request.amount <= 0:
        raise InvalidAmountError()
    if payment_request.currency == "":
        raise MissingCurrencyError()


class PaymentService:
    def __init__(self, id_generator: IdGenerator):
        """Initialize the PaymentService with the id generator used for new payments."""
        self.id_generator = id_generator

    def create_payment(self, payment_request: PaymentRequest) -> Payment:
        """Validate a payment request and turn it into a pending payment.

        Nothing is stored: the payment only lives as long as the response.
        """
        validate_payment_request(payment_request)

        payment = Payment(
            id=self.id_generator.generate(),
            amount=payment_request.amount,
            currency=payment_request.currency,
            status=PaymentStatus.PENDING,
            description=payment_request.description,
        )

        logger.info(
            f"Payment created: ID={payment.id}, Amount={payment.amount:.2f} {payment.currency}, "
            f"Status={payment.status.value}, Description={json.dumps(payment.description or '', ensure_ascii=False)}"
        )
        return payment

    def get_payment_status(self) -> Payment:
        """Return the mock payment record; there is no store to look ids up in."""
        return MOCK_PAYMENT.model_copy()
