"""
Centralized configuration for the Roadmap backend.

All settings are loaded from environment variables with sensible defaults.
Values are read once at startup; business logic receives them through
explicit arguments (see TokenSettings) instead of reading the environment.
"""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_JWT_EXPIRES_IN_HOURS = 24


class TokenSettings(BaseModel):
    """Immutable token configuration handed to the token service."""

    model_config = {"frozen": True}

    secret_key: str = Field(..., description="HMAC secret used to sign tokens")
    expires_in: timedelta = Field(..., description="Token lifetime")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Roadmap API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
    cors_allow_headers: list[str] = [
        "Origin",
        "Content-Length",
        "Content-Type",
        "Authorization",
        "Accept",
        "X-Requested-With",
    ]
    cors_expose_headers: list[str] = ["Content-Length", "Content-Type", "Authorization"]
    cors_max_age: int = 43200  # seconds

    # Supabase (identity store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    store_timeout_seconds: Optional[float] = None

    # Direct Postgres connection (migrations only)
    database_url: str = ""

    # JWT
    jwt_secret_key: str = "your-secret-key-change-in-production"
    jwt_expires_in_hours: int = DEFAULT_JWT_EXPIRES_IN_HOURS

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    def token_settings(self) -> TokenSettings:
        """
        Build the token configuration.

        Non-positive lifetimes are rejected here and replaced with the
        default, so a misconfigured environment never issues dead tokens.
        """
        hours = self.jwt_expires_in_hours
        if hours <= 0:
            logger.warning(
                f"Invalid JWT_EXPIRES_IN_HOURS value '{hours}', "
                f"using default {DEFAULT_JWT_EXPIRES_IN_HOURS} hours"
            )
            hours = DEFAULT_JWT_EXPIRES_IN_HOURS
        return TokenSettings(
            secret_key=self.jwt_secret_key,
            expires_in=timedelta(hours=hours),
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
