"""
Configuration module for the FAQ search service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the FAQ search service.

    Attributes:
        APP_NAME: Display name for the application
        SERVICE_NAME: Service identifier used in logs and health output
        VERSION: Service version
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Emit JSON logs instead of console output
        CORS_ORIGINS: Comma-separated allowed origins
        FAQ_SEED_FILE: Optional JSON file loaded into the FAQ store on startup
        MIN_SEARCH_QUERY_LENGTH: Minimum stripped query length for /search
        DEFAULT_PAGE_SIZE: Results per page when no limit is given
        MAX_PAGE_SIZE: Upper bound for the limit parameter
        SUGGESTION_LIMIT: Maximum suggestions returned
        SCORE_PRECISION: Decimal places of serialized relevance scores
    """

    APP_NAME: str = Field(default="FAQ Search Service", description="Display name")
    SERVICE_NAME: str = Field(default="faq-search-service", description="Service identifier")
    VERSION: str = Field(default="1.0.0", description="Service version")

    HOST: str = Field(default="0.0.0.0", description="Server bind address")
    PORT: int = Field(default=8000, ge=1, le=65535, description="Server port number")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(default=False, description="Use JSON structured logging")

    CORS_ORIGINS: str = Field(default="*", description="Comma-separated allowed origins")

    FAQ_SEED_FILE: Optional[Path] = Field(
        default=None,
        description="JSON file with FAQs loaded on startup",
    )

    MIN_SEARCH_QUERY_LENGTH: int = Field(default=3, ge=1, description="Minimum query length")
    DEFAULT_PAGE_SIZE: int = Field(default=20, ge=1, description="Default results per page")
    MAX_PAGE_SIZE: int = Field(default=100, ge=1, description="Maximum results per page")
    SUGGESTION_LIMIT: int = Field(default=5, ge=1, le=50, description="Maximum suggestions")
    SCORE_PRECISION: int = Field(default=4, ge=0, le=10, description="Score decimal places")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("FAQ_SEED_FILE")
    @classmethod
    def validate_seed_file(cls, value: Optional[Path]) -> Optional[Path]:
        """
        Validate that the seed file exists when configured.

        Raises:
            ValueError: If the path does not point to a file
        """
        if value is not None and not value.is_file():
            raise ValueError(f"FAQ seed file not found: {value}")
        return value

    @property
    def cors_origins(self) -> list[str]:
        """Allowed origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
