# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service settings, read from the environment at import time.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "team-join-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    # Default visibility policy; a join request may override it.
    PUBLIC_MODE: bool = os.getenv("PUBLIC_MODE", "false").lower() == "true"
    PRIVATE_KEY: str = os.getenv("PRIVATE_KEY", "private")
    HOLD_STATUS: str = os.getenv("HOLD_STATUS", "Hold")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
