import pytest
from fastapi.testclient import TestClient


def test_fastapi_app_can_be_created():
    """Test that the main FastAPI application can be created and started."""
    from main import app

    with TestClient(app) as client:
        # Basic health check - the app should be able to serve requests
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


def test_fastapi_app_includes_payment_routes():
    """Test that the main app includes the payment processing routes."""
    from main import app

    client = TestClient(app)
    response = client.get("/payments/status")
    assert response.status_code == 200

    response = client.post("/payments", json={"amount": 1, "currency": "RUB"})
    assert response.status_code == 201


def test_health_rejects_other_methods(client):
    """Test that the health probe only answers GET"""
    response = client.post("/health")

    assert response.status_code == 405
    assert response.text == "Invalid method"


def test_swagger_ui_is_served(client):
    """Test that the interactive API explorer is mounted under /swagger"""
    response = client.get("/swagger/index.html")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_openapi_document_describes_payment_routes(client):
    """Test that the OpenAPI document carries the API metadata and both payment routes"""
    response = client.get("/swagger/doc.json")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "Payment System API"
    assert document["info"]["version"] == "1.0"
    assert "post" in document["paths"]["/payments"]
    assert "get" in document["paths"]["/payments/status"]


def test_profile_query_param_is_ignored_when_profiling_disabled(client):
    """Test that ?profile has no effect unless profiling is switched on"""
    response = client.get("/payments/status?profile=1")

    assert response.status_code == 200
    assert response.json()["id"] == "pay_12345"


def test_profile_query_param_returns_html_report_when_enabled(profiling_client):
    """Test that the profiling middleware swaps the response for a pyinstrument report"""
    response = profiling_client.get("/payments/status?profile=1")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_profiling_middleware_passes_through_without_param(profiling_client):
    """Test that requests without ?profile are served normally"""
    response = profiling_client.get("/payments/status")

    assert response.status_code == 200
    assert response.json()["status"] == "succeeded"


class BrokenPaymentService:
    def get_payment_status(self):
        raise RuntimeError("payment lookup exploded")


def test_unexpected_error_returns_generic_500():
    """Test that an unhandled exception becomes a 500 without leaking its message"""
    from payment_intake.api import create_app

    app = create_app(payment_service=BrokenPaymentService())
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/payments/status")

    assert response.status_code == 500
    assert response.text == "Internal server error"
    assert "exploded" not in response.text
