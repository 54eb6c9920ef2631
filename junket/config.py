"""
Application configuration using Pydantic Settings.
All environment variables are loaded from .env file.
"""

import logging
from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_log_level(value) -> str:
    """Upper-case a level name and reject names logging doesn't know."""
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return parse_log_level(v)

    # Display
    base_currency: str = Field(
        default="HKD",
        description="Currency trip amounts are recorded in"
    )

    # Sharing
    legacy_agent_share_percentage: Decimal = Field(
        default=Decimal("50"),
        description="Agent share used by single-agent legacy call sites"
    )

    # Validation
    cash_flow_warning_ratio: Decimal = Field(
        default=Decimal("2"),
        gt=0,
        description="Warn when |net cash flow| exceeds this multiple of |win/loss|"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
