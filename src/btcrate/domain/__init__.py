# src/btcrate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the service error taxonomy.
No dependencies on infrastructure or external systems.
"""

from btcrate.domain.models import (
    DisplayState,
    ExchangeRateData,
    ExchangeRateResponse,
    RatePhase,
)
from btcrate.domain.errors import (
    DecodeError,
    FetchError,
    InvalidResponseError,
    InvalidURLError,
    ServiceError,
)

__all__ = [
    "DisplayState",
    "ExchangeRateData",
    "ExchangeRateResponse",
    "RatePhase",
    "ServiceError",
    "InvalidURLError",
    "FetchError",
    "DecodeError",
    "InvalidResponseError",
]
