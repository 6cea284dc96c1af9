"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. The dispatcher itself is configuration-free; settings only drive the
ambient concerns (environment detection and logging).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    # Access config
    level = settings.log_level

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    # Environment check (selects the log renderer)
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
