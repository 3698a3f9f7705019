# src/btcrate/__init__.py
"""
BTCRate - Bitcoin Exchange Rate Label

A small layered application (View / Presenter / Interactor / Service) that
fetches the current BTC→AUD exchange rate from Coinbase and displays it
as a single line of text.
"""

__version__ = "1.0.0"
