import pytest
from fastapi.testclient import TestClient

from payment_intake.adapters.ids import FixedIdGenerator, UuidIdGenerator
from payment_intake.api import create_app
from payment_intake.config.settings import Settings
from payment_intake.domain.services import PaymentService


class SequentialIdGenerator:
    """Predictable ids for tests: pay_1, pay_2, ..."""

    def __init__(self):
        self.issued = 0

    def generate(self) -> str:
        self.issued += 1
        return f"pay_{self.issued}"


def create_payment_service(id_generator=None):
    """Factory function to create PaymentService with sensible defaults"""
    return PaymentService(id_generator=id_generator or UuidIdGenerator())


@pytest.fixture
def payment_service_factory():
    """Fixture that returns the payment service factory function"""
    return create_payment_service


@pytest.fixture
def sequential_id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def client(payment_service_factory):
    """Create a test client backed by the default (uuid) id generator"""
    app = create_app(payment_service=payment_service_factory())
    return TestClient(app)


@pytest.fixture
def fixed_id_client(payment_service_factory):
    """Create a test client that reproduces the placeholder pay_12345 ids"""
    app = create_app(payment_service=payment_service_factory(FixedIdGenerator()))
    return TestClient(app)


@pytest.fixture
def profiling_client(payment_service_factory):
    """Create a test client with the profiling middleware enabled"""
    app = create_app(
        payment_service=payment_service_factory(),
        settings=Settings(enable_profiling=True),
    )
    return TestClient(app)


@pytest.fixture
def valid_payment_data():
    """Create valid payment data for testing"""
    return {"amount": 100.5, "currency": "RUB"}
