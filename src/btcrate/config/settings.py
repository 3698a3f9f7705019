# src/btcrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file; the defaults
reproduce the stock behaviour (BTC priced in AUD from Coinbase, no timeout).

Files that USE this module:
- btcrate.app (loads settings for logging and wiring)
- btcrate.adapters.providers.coinbase (endpoint, currencies, timeout)

Files that this module USES:
- btcrate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from btcrate.shared.validators import (
    validate_currency_code,  # Validate three-letter currency codes
    validate_http_url,  # Validate endpoint URL shape
    validate_log_level,  # Validate logging level names
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Exchange rate source ---
    exchange_rates_url: str = Field(
        default="https://api.coinbase.com/v2/exchange-rates", alias="EXCHANGE_RATES_URL"
    )
    base_currency: str = Field(default="BTC", alias="BASE_CURRENCY")
    target_currency: str = Field(default="AUD", alias="TARGET_CURRENCY")

    # --- HTTP Settings ---
    # None leaves the requests default in place (no timeout)
    http_timeout_seconds: Optional[float] = Field(
        default=None, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    # stdout carries the rate label, so diagnostics default to stderr
    log_stdout: bool = Field(default=False, alias="BTCRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("base_currency", "target_currency", mode="before")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Normalise to upper case and validate currency code format."""
        v = str(v).strip().upper()
        if not validate_currency_code(v):
            raise ValueError("Currency must be a three-letter code")
        return v

    @field_validator("exchange_rates_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URL format."""
        if not validate_http_url(v):
            raise ValueError("EXCHANGE_RATES_URL must be an absolute http(s) URL")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        if not validate_log_level(v):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()


# Global settings instance
settings = Settings()
