# src/btcrate/application/interactor.py
"""
Rate Interactor - Runs the Service and Delivers One Result per Fetch

This module sits between the presenter and the rate service. It runs the
blocking service call on a worker thread, observes the outcome of that task,
and hands the result (or None on any ServiceError) to its single subscriber.

Files that USE this module:
- btcrate.application.presenter (RatePresenter subscribes to results)
- btcrate.app (wires the interactor to the Coinbase service)
- tests.test_interactor (unit tests)

Files that this module USES:
- btcrate.adapters.providers.base (RateService interface)
- btcrate.domain.errors (ServiceError is collapsed into None)
"""
from __future__ import annotations

import asyncio
import logging
import weakref
from typing import Callable, Optional

from btcrate.adapters.providers.base import RateService
from btcrate.domain.errors import ServiceError

logger = logging.getLogger(__name__)

RateResultHandler = Callable[[Optional[str]], None]


class RateSubscription:
    """
    Handle for the interactor's result slot.

    Bound-method handlers are held through a weak reference, so the
    subscription never keeps the handler's owner alive. Once the owner is
    collected, the subscription is dead and deliveries are dropped.
    """

    def __init__(self, interactor: RateInteractor, handler: RateResultHandler):
        self._interactor = interactor
        if hasattr(handler, "__self__") and hasattr(handler, "__func__"):
            self._handler_ref: Callable[[], Optional[RateResultHandler]] = weakref.WeakMethod(handler)
        else:
            self._handler_ref = lambda: handler
        self._cancelled = False

    @property
    def active(self) -> bool:
        """True while not cancelled, not replaced, and the handler is alive."""
        return (
            not self._cancelled
            and self._interactor._subscription is self
            and self._handler_ref() is not None
        )

    def cancel(self) -> None:
        """Release the slot. Does nothing if this subscription was already replaced."""
        self._cancelled = True
        if self._interactor._subscription is self:
            self._interactor._subscription = None

    def deliver(self, rate: Optional[str]) -> bool:
        """
        Pass a result to the handler.

        Returns:
            True if the handler ran, False if the subscription is dead
        """
        if self._cancelled:
            return False
        handler = self._handler_ref()
        if handler is None:
            logger.debug("Rate handler owner was collected, dropping subscription")
            self.cancel()
            return False
        handler(rate)
        return True


class RateInteractor:
    """Fetches a rate through a RateService and reports it to one subscriber."""

    def __init__(self, service: RateService):
        """
        Initialize interactor with a service.

        Args:
            service: RateService instance (typically CoinbaseRateService)
        """
        self.service = service
        self._subscription: Optional[RateSubscription] = None

    def subscribe(self, handler: RateResultHandler) -> RateSubscription:
        """
        Register the result handler, replacing any previous one.

        Args:
            handler: Called with the rate string, or None when the fetch failed

        Returns:
            RateSubscription that can be cancelled
        """
        if self._subscription is not None:
            self._subscription.cancel()
        self._subscription = RateSubscription(self, handler)
        return self._subscription

    async def fetch_rate(self) -> Optional[str]:
        """
        Fetch the rate once and deliver it to the subscriber.

        The service call runs as its own task; the task's outcome is inspected
        rather than awaited directly, so a ServiceError ends up as None instead
        of propagating. Errors that are not ServiceError are bugs and propagate.

        Returns:
            The delivered value: rate string, or None on failure
        """
        task = asyncio.create_task(asyncio.to_thread(self.service.fetch_rate))
        await asyncio.wait({task})

        error = task.exception()
        if error is None:
            rate: Optional[str] = task.result()
        elif isinstance(error, ServiceError):
            logger.debug("Rate fetch failed (%s): %s", type(error).__name__, error)
            rate = None
        else:
            raise error

        if self._subscription is not None:
            self._subscription.deliver(rate)
        return rate
