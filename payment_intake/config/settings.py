import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment at startup."""

    host: str = "0.0.0.0"
    port: int = 8080
    payment_id_strategy: str = "uuid"
    enable_profiling: bool = False
    docs_url: str = "/swagger/index.html"
    openapi_url: str = "/swagger/doc.json"


def load_settings() -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    port = os.getenv("PORT", "8080")
    try:
        port_number = int(port)
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {port!r}") from e

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port_number,
        payment_id_strategy=os.getenv("PAYMENT_ID_STRATEGY", "uuid").lower(),
        enable_profiling=os.getenv("ENABLE_PROFILING", "false").lower() in TRUTHY,
    )
