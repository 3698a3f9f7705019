# src/btcrate/domain/models.py
"""
Domain Models - Display State and Wire Shapes

This module contains the objects that flow between the layers:
- DisplayState: what the view renders
- RatePhase: where the presenter is in its fetch cycle
- ExchangeRateResponse / ExchangeRateData: the decoded Coinbase envelope

Files that USE this module:
- btcrate.adapters.providers.coinbase (decodes responses into ExchangeRateResponse)
- btcrate.application.presenter (owns DisplayState and RatePhase)
- btcrate.adapters.view.label (reads DisplayState)
- tests.* (tests use domain models for test data)

Files that this module USES:
- pydantic (validation of the wire envelope)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Presenter phase enumeration
from typing import Dict  # Type hints for the rates mapping

from pydantic import BaseModel, ConfigDict  # Wire envelope validation


@dataclass(frozen=True)
class DisplayState:
    """
    Text shown by the view.

    Attributes:
        rate: Decimal string of the rate, or "" when not loaded or unavailable
    """
    rate: str = ""


class RatePhase(str, Enum):
    """Presenter fetch cycle: Idle → Loading → Loaded."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


class ExchangeRateData(BaseModel):
    """
    Inner ``data`` object of the exchange-rates response.

    Attributes:
        currency: Base currency code the rates are quoted against (e.g. "BTC")
        rates: Mapping of currency code to decimal string (e.g. {"AUD": "98765.43"})
    """
    model_config = ConfigDict(extra="ignore")

    currency: str
    rates: Dict[str, str]


class ExchangeRateResponse(BaseModel):
    """Envelope returned by GET /v2/exchange-rates."""
    model_config = ConfigDict(extra="ignore")

    data: ExchangeRateData
