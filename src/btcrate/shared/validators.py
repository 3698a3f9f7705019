# src/btcrate/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for configuration values read
from the environment: currency codes, log level names and endpoint URLs.

Files that USE this module:
- btcrate.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re
import urllib.parse

_CURRENCY_RE = re.compile(r'^[A-Z]{3}$')


def validate_currency_code(code: str) -> bool:
    """
    Validate an ISO-4217 style currency code (three upper-case letters).

    Crypto tickers such as BTC follow the same shape.

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(_CURRENCY_RE.match(code))


def validate_log_level(level: str) -> bool:
    """
    Validate a logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Args:
        level: Level name, case-insensitive

    Returns:
        True if the name maps to a standard logging level, False otherwise
    """
    if not level:
        return False
    return isinstance(logging.getLevelName(level.upper()), int)


def validate_http_url(url: str) -> bool:
    """
    Validate that a string looks like an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        True if the URL has an http/https scheme and a well-formed host, False otherwise
    """
    if not url:
        return False
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    # DNS labels are 1-63 characters
    return all(0 < len(label) <= 63 for label in parsed.hostname.rstrip(".").split("."))
