# src/btcrate/domain/errors.py
"""
Domain Errors - Rate Service Exceptions

This module defines the failures a rate service can raise. All of them
derive from ServiceError, which is what the interactor collapses into an
absent rate.
"""
from typing import Optional


class ServiceError(Exception):
    """Base exception for rate service failures."""
    pass


class InvalidURLError(ServiceError):
    """Raised when the request URL cannot be built."""
    pass


class FetchError(ServiceError):
    """Raised when the HTTP round trip fails or returns a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ServiceError):
    """Raised when the response body is not the expected JSON envelope."""
    pass


class InvalidResponseError(ServiceError):
    """Raised when the target currency is missing from the rates mapping."""
    pass
