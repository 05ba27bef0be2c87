"""
Configuration system for exception-workshop.

Handles environment-based configuration with Pydantic Settings.
"""

import os
from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exception_workshop.utils.calculator import SUPPORTED_BITS


class Environment(str, Enum):
    """Environment types the workshop runs in."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class Config(BaseSettings):
    """
    Application configuration with environment-based settings.

    Configuration priority:
    1. Environment variables
    2. Variables from .env file
    3. Default field values

    Example .env file:
        EXCEPTION_WORKSHOP_ENV=development
        INTEGER_BITS=32
        LOG_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    exception_workshop_env: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, staging, production)",
    )

    # Arithmetic settings
    integer_bits: int = Field(
        default=32,
        description="Default integer width for checked arithmetic in the CLI (8, 16, 32, 64)",
    )

    # General settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_rich_tracebacks: bool = Field(
        default=True,
        description="Render logged tracebacks with Rich",
    )

    @field_validator("integer_bits")
    @classmethod
    def validate_integer_bits(cls, value: int) -> int:
        """Only widths the calculator supports are accepted."""
        if value not in SUPPORTED_BITS:
            raise ValueError(f"integer_bits must be one of {SUPPORTED_BITS}, got {value}")
        return value

    @model_validator(mode="after")
    def apply_debug_log_level(self):
        """Debug mode always logs at DEBUG level."""
        if self.debug:
            self.log_level = "DEBUG"
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.exception_workshop_env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.exception_workshop_env == Environment.PRODUCTION

    @property
    def is_staging(self) -> bool:
        """Check if running in staging environment."""
        return self.exception_workshop_env == Environment.STAGING


@lru_cache
def get_config() -> Config:
    """
    Get cached configuration instance.

    Uses lru_cache to avoid repeated .env file reads.
    Clear cache with get_config.cache_clear() if needed.

    Returns:
        Cached Config instance
    """
    # Check for environment-specific .env file
    env = os.getenv("EXCEPTION_WORKSHOP_ENV", "development")
    env_file = f".env.{env}"

    if os.path.exists(env_file):
        return Config(_env_file=env_file)

    return Config()
