from payment_intake.config.logging import setup_logging
from payment_intake.config.settings import load_settings
from payment_intake.api import create_app
from payment_intake.factories import create_payment_service

# Setup logging first
setup_logging()

settings = load_settings()

# Create the payment service
payment_service = create_payment_service(settings)

# Create the FastAPI app; the router is built here and owned by this app
app = create_app(payment_service, settings)


def main():
    import uvicorn
    from payment_intake.config.logging import get_uvicorn_log_level

    # Get log level for uvicorn
    log_level = get_uvicorn_log_level()

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=log_level
    )


if __name__ == "__main__":
    main()
