# src/btcrate/adapters/providers/__init__.py
"""
Provider Adapters - Exchange Rate Services

This package contains the rate services the interactor can call.
All services implement the RateService interface.
"""

from btcrate.adapters.providers.base import RateService
from btcrate.adapters.providers.coinbase import CoinbaseRateService
from btcrate.adapters.providers.fixed import FixedRateService

__all__ = [
    "RateService",
    "CoinbaseRateService",
    "FixedRateService",
]
