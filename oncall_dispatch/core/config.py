# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, read once at import.
Collaborators receive these values through their constructors
(see core/dependencies.py); business logic never touches os.environ.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "oncall-dispatch")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "4000"))

    # Persistence — in-memory collections unless a Mongo URI is provided
    MONGO_URI: str = os.getenv("MONGO_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "dispatch")

    # SSO token exchange
    SSO_URL: str = os.getenv("SSO_URL", "")
    SSO_APP_ID: str = os.getenv("SSO_APP_ID", "")
    SSO_TIMEOUT: float = float(os.getenv("SSO_TIMEOUT", "5.0"))
    AUTH_COOKIE_NAME: str = os.getenv("AUTH_COOKIE_NAME", "accessToken")
    AUTH_CACHE_TTL: int = int(os.getenv("AUTH_CACHE_TTL", "300"))
    AUTH_CACHE_SIZE: int = int(os.getenv("AUTH_CACHE_SIZE", "1024"))

    # Twilio outbound SMS
    TWILIO_ACCOUNT_SID: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    TWILIO_API_TOKEN: str = os.getenv("TWILIO_API_TOKEN", "")
    TWILIO_API_SECRET: str = os.getenv("TWILIO_API_SECRET", "")
    TWILIO_OUTBOUND_NUMBER: str = os.getenv("TWILIO_OUTBOUND_NUMBER", "")
    TWILIO_BASE_URL: str = os.getenv("TWILIO_BASE_URL", "https://api.twilio.com/2010-04-01")
    TWILIO_TIMEOUT: float = float(os.getenv("TWILIO_TIMEOUT", "10.0"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    RECONCILE_ON_STARTUP: bool = (
        os.getenv("RECONCILE_ON_STARTUP", "true").lower() == "true"
    )


settings = Settings()
