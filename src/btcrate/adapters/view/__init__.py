# src/btcrate/adapters/view/__init__.py
"""
View Adapters - Text Output

This package contains the passive text label that renders presenter state.
"""

from btcrate.adapters.view.label import RateLabelView

__all__ = ["RateLabelView"]
