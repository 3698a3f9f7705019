# src/btcrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from btcrate.shared.validators import (
    validate_currency_code,
    validate_http_url,
    validate_log_level,
)
from btcrate.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_http_url",
    "validate_log_level",
    "setup_logging",
]
