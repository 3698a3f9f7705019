# src/btcrate/adapters/providers/base.py
"""
Base Service Interface for Exchange Rate Services

This module defines the abstract base class for all rate services.
It establishes the contract that all service implementations must follow.

Files that USE this module:
- btcrate.adapters.providers.coinbase (CoinbaseRateService implements RateService)
- btcrate.adapters.providers.fixed (FixedRateService implements RateService)
- btcrate.application.interactor (depends on RateService)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod

class RateService(ABC):
    @abstractmethod
    def fetch_rate(self) -> str:
        """Return the target-currency rate as a decimal string.

        Raises:
            ServiceError: on any failure (see btcrate.domain.errors)
        """
        raise NotImplementedError
