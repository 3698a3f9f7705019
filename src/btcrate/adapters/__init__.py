# src/btcrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (exchange rate APIs)
- View (text label output)
"""

__all__ = []
