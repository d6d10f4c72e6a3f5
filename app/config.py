# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.AIRTABLE_BASE_ID)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Values are read once at process start and never change afterwards.
# =============================================================================

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The Airtable token and base ID are optional at the settings level so the
    server can still boot (and report itself as degraded) without them.
    The Airtable client refuses to build until both are present.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP listener"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, '*' for any)"
    )

    # -------------------------------------------------------------------------
    # Airtable
    # -------------------------------------------------------------------------

    AIRTABLE_TOKEN: str | None = Field(
        default=None,
        description="Airtable personal access token"
    )

    AIRTABLE_BASE_ID: str | None = Field(
        default=None,
        description="Airtable base the client is scoped to (e.g., appXXXXXXXXXXXXXX)"
    )

    AIRTABLE_RESERVATIONS_TABLE: str = Field(
        default="Reservations",
        min_length=1,
        description="Table that stores reservations"
    )

    AIRTABLE_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Connect/read timeout for Airtable requests"
    )

    # -------------------------------------------------------------------------
    # Reservations
    # -------------------------------------------------------------------------

    RESTAURANT_TIMEZONE: str = Field(
        default="Europe/Rome",
        description="IANA timezone used for relative dates and arrival times"
    )

    PHONE_COUNTRY_CODE: str = Field(
        default="+39",
        description="Prefix added to phone numbers pulled from transcripts"
    )

    @field_validator("RESTAURANT_TIMEZONE")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Fail at startup on an unknown IANA zone."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def allows_all_origins(self) -> bool:
        """True when any origin may call the API."""
        return "*" in self.cors_origins_list

    @property
    def airtable_configured(self) -> bool:
        """Both the token and the base ID are set."""
        return bool(self.AIRTABLE_TOKEN) and bool(self.AIRTABLE_BASE_ID)

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.RESTAURANT_TIMEZONE)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
