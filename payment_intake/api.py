from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse
from pyinstrument import Profiler
from starlette.exceptions import HTTPException as StarletteHTTPException

from payment_intake.config.settings import Settings
from payment_intake.domain.models import HealthResponse, Payment, PaymentRequest
from payment_intake.domain.services import (
    MalformedInputError,
    MethodNotAllowedError,
    PaymentError,
    PaymentService,
)

logger = logging.getLogger(__name__)

API_DESCRIPTION = (
    "API for managing payments. Supports creating payments and checking "
    "payment status."
)

TEXT_ERROR = {"content": {"text/plain": {"schema": {"type": "string"}}}}


def error_response(error: PaymentError, headers: Optional[dict] = None) -> PlainTextResponse:
    """Render a payment error as a plain-text body carrying only its fixed message."""
    return PlainTextResponse(error.message, status_code=error.status_code, headers=headers)


def create_router(payment_service: PaymentService) -> APIRouter:
    """Build the payments router; the caller decides which app it is mounted on."""
    router = APIRouter(tags=["payments"])

    @router.post(
        "/payments",
        response_model=Payment,
        response_model_exclude_none=True,
        status_code=201,
        summary="Create payment",
        responses={
            400: {"description": "Invalid JSON or invalid payment data", **TEXT_ERROR},
            405: {"description": "Method not allowed", **TEXT_ERROR},
        },
    )
    async def create_payment(payment_request: PaymentRequest):
        """Create a new payment, validating amount and currency."""
        return payment_service.create_payment(payment_request)

    @router.get(
        "/payments/status",
        response_model=Payment,
        response_model_exclude_none=True,
        summary="Get payment status",
        responses={405: {"description": "Method not allowed", **TEXT_ERROR}},
    )
    async def get_payment_status():
        """Return information about the status of a payment."""
        return payment_service.get_payment_status()

    return router


def create_app(
    payment_service: PaymentService,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Payment System API running on http://{settings.host}:{settings.port}")
        logger.info(f"Swagger UI: http://{settings.host}:{settings.port}{settings.docs_url}")

        yield

        logger.info("Payment System API stopped")

    app = FastAPI(
        lifespan=lifespan,
        title="Payment System API",
        version="1.0",
        description=API_DESCRIPTION,
        contact={"name": "API Support", "email": "support@example.com"},
        license_info={"name": "Apache 2.0", "url": "http://www.apache.org/licenses/LICENSE-2.0.html"},
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
        # exact path match only, /payments/ is a 404
        redirect_slashes=False,
    )

    # Global exception handlers
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error in {request.method} {request.url.path}: {str(exc)}")
        return PlainTextResponse("Internal server error", status_code=500)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Parser details go to the log only, the caller gets the generic message
        logger.warning(f"Error decoding JSON in {request.method} {request.url.path}: {exc.errors()}")
        return error_response(MalformedInputError())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == MethodNotAllowedError.status_code:
            logger.warning(f"Method {request.method} not allowed on {request.url.path}")
            return error_response(MethodNotAllowedError(), headers=exc.headers)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        return error_response(exc)

    if settings.enable_profiling:
        @app.middleware("http")
        async def profile_request(request: Request, call_next):
            profiling = request.query_params.get("profile", False)
            if profiling:
                profiler = Profiler(interval=0.0001)
                profiler.start()
                await call_next(request)
                profiler.stop()
                return HTMLResponse(profiler.output_html())
            else:
                return await call_next(request)

    app.include_router(create_router(payment_service))

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Simple health check endpoint for load balancer."""
        return HealthResponse(status="healthy")

    return app
