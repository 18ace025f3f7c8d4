import os
import logging

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

def get_log_level() -> str:
    """Get log level from environment variable, INFO when unset or unknown."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in VALID_LEVELS:
        return "INFO"
    return log_level

def get_uvicorn_log_level() -> str:
    """Get log level for Uvicorn (lowercase)."""
    return get_log_level().lower()

def setup_logging() -> None:
    """Setup simple logging configuration."""
    log_level = get_log_level()

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logging.getLogger("uvicorn").setLevel(getattr(logging, log_level))
    logging.getLogger("uvicorn.access").setLevel(getattr(logging, log_level))
    logging.getLogger("uvicorn.error").setLevel(getattr(logging, log_level))

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
