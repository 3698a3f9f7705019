# src/btcrate/application/__init__.py
"""
Application Layer - Interactor and Presenter

This package contains the use-case orchestration between the rate service
and the view. No direct I/O - services are reached through interfaces.
"""

from btcrate.application.interactor import RateInteractor, RateSubscription
from btcrate.application.presenter import RatePresenter

__all__ = [
    "RateInteractor",
    "RateSubscription",
    "RatePresenter",
]
