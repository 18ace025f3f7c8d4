from payment_intake.adapters.ids import FixedIdGenerator, UuidIdGenerator
from payment_intake.config.settings import Settings
from payment_intake.domain.protocols import IdGenerator
from payment_intake.domain.services import PaymentService


def create_id_generator(strategy: str) -> IdGenerator:
    """Pick the payment id generator for the configured strategy."""
    if strategy == "uuid":
        return UuidIdGenerator()
    if strategy == "fixed":
        return FixedIdGenerator()
    raise ValueError(f"Unknown payment id strategy: {strategy!r} (expected 'uuid' or 'fixed')")


def create_payment_service(settings: Settings) -> PaymentService:
    """Create a PaymentService wired for production use."""
    return PaymentService(id_generator=create_id_generator(settings.payment_id_strategy))
