# src/btcrate/app.py
"""
Application Entry Point - Wiring and Startup

This module serves as the composition root. It wires the rate service,
interactor, presenter and view, shows the view once, and exits.

Files that USE this module:
- btcrate console script (pyproject.toml [project.scripts])
- python -m btcrate.app

Files that this module USES:
- btcrate.shared.logging_conf (setup_logging for logging configuration)
- btcrate.config (settings for configuration management)
- btcrate.adapters.providers.coinbase (CoinbaseRateService)
- btcrate.application (RateInteractor, RatePresenter)
- btcrate.adapters.view.label (RateLabelView)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import asyncio  # Event loop for the asynchronous fetch chain
import logging  # Standard library for logging messages and errors
from typing import Optional, TextIO  # Type hints for the output stream

from btcrate.shared.logging_conf import setup_logging  # Configure logging with file rotation
from btcrate.adapters.providers.base import RateService  # Service interface
from btcrate.adapters.providers.coinbase import CoinbaseRateService  # Coinbase-backed service
from btcrate.application.interactor import RateInteractor  # Service → presenter bridge
from btcrate.application.presenter import RatePresenter  # Display state holder
from btcrate.adapters.view.label import RateLabelView  # Text label view


def build_view(service: Optional[RateService] = None, stream: Optional[TextIO] = None) -> RateLabelView:
    """
    Wire the four layers together.

    Args:
        service: Rate service to use (defaults to CoinbaseRateService)
        stream: Output stream for the label (defaults to sys.stdout)

    Returns:
        RateLabelView ready to appear
    """
    interactor = RateInteractor(service=service or CoinbaseRateService())
    presenter = RatePresenter(interactor=interactor)
    return RateLabelView(presenter=presenter, stream=stream)


async def run(view: RateLabelView) -> str:
    """Show the view, wait for the fetch to settle, and return the final label text."""
    await view.appear()
    return view.text


def main() -> None:
    """
    Fetch and display the BTC rate once.

    This function:
    1. Sets up logging from settings
    2. Builds the service → interactor → presenter → view chain
    3. Shows the view, which triggers exactly one fetch
    """
    from btcrate.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)
    logger.debug(
        "Fetching %s→%s from %s",
        settings.base_currency,
        settings.target_currency,
        settings.exchange_rates_url,
    )

    view = build_view()
    try:
        asyncio.run(run(view))
    finally:
        view.close()


if __name__ == "__main__":
    main()
