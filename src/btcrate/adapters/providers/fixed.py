# src/btcrate/adapters/providers/fixed.py
"""
Fixed Rate Service - Offline Stand-in for the Coinbase Service

Returns a preset rate, or raises a preset ServiceError, without touching
the network. Used by the tests and for running the pipeline offline.
"""
from typing import Optional

from btcrate.adapters.providers.base import RateService
from btcrate.domain.errors import ServiceError


class FixedRateService(RateService):
    def __init__(self, rate: str = "", error: Optional[ServiceError] = None):
        self.rate = rate
        self.error = error
        self.calls = 0

    def fetch_rate(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rate
