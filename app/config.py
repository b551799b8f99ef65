# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.AUTH_TOKEN)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the API starts with no
    configuration at all.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # API Metadata (OpenAPI document)
    # -------------------------------------------------------------------------

    API_TITLE: str = Field(default="UserManagementAPI")

    API_VERSION: str = Field(default="v1")

    API_DESCRIPTION: str = Field(
        default="API para gestión de usuarios del departamento HR/IT"
    )

    API_CONTACT_NAME: str = Field(default="Tu Nombre")

    API_CONTACT_EMAIL: str = Field(default="tu.email@example.com")

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    # Full Authorization header value accepted by the auth middleware.
    # Compared case-insensitively.
    AUTH_TOKEN: str = Field(
        default="Bearer mysecrettoken",
        min_length=1,
        description="Static Authorization header value accepted by the API"
    )

    HTTPS_REDIRECT: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS"
    )

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    SEED_USERS: bool = Field(
        default=True,
        description="Seed the in-memory store with the two default users"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def docs_enabled(self) -> bool:
        """Swagger UI and the OpenAPI document are only served outside production."""
        return not self.is_production


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
