# src/btcrate/application/presenter.py
"""
Rate Presenter - Display State Holder

Owns the DisplayState the view renders. Activation asks the interactor for
a rate; the interactor's result replaces the state and listeners are told.

Files that USE this module:
- btcrate.adapters.view.label (RateLabelView renders presenter state)
- btcrate.app (composition root)
- tests.test_presenter (unit tests)

Files that this module USES:
- btcrate.application.interactor (RateInteractor, RateSubscription)
- btcrate.domain.models (DisplayState, RatePhase)
"""
from __future__ import annotations

import logging
import weakref
from typing import Callable, List, Optional

from btcrate.application.interactor import RateInteractor
from btcrate.domain.models import DisplayState, RatePhase

logger = logging.getLogger(__name__)

StateListener = Callable[[DisplayState], None]


class RatePresenter:
    """Holds the rate display state and refreshes it on activation."""

    def __init__(self, interactor: RateInteractor):
        self._interactor = interactor
        self._state = DisplayState(rate="")
        self._phase = RatePhase.IDLE
        self._listeners: List[StateListener] = []

        self._subscription = interactor.subscribe(self._handle_rate)
        # Free the interactor slot when this presenter goes away
        self._finalizer = weakref.finalize(self, self._subscription.cancel)

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def phase(self) -> RatePhase:
        return self._phase

    async def on_activate(self) -> None:
        """
        Fetch the rate once.

        By the time this returns, the result handler has already run and
        state reflects the fetched rate (or "" on failure). The phase ends at
        LOADED even when no result is delivered (closed presenter, or an
        unexpected error propagating from the interactor).
        """
        self._phase = RatePhase.LOADING
        try:
            await self._interactor.fetch_rate()
        finally:
            self._phase = RatePhase.LOADED

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a state-change listener.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def close(self) -> None:
        """Stop receiving rates and drop all listeners."""
        self._finalizer()
        self._listeners.clear()

    def _handle_rate(self, rate: Optional[str]) -> None:
        self._state = DisplayState(rate=rate or "")
        self._phase = RatePhase.LOADED
        logger.debug("Display state updated: %r", self._state.rate)
        for listener in list(self._listeners):
            listener(self._state)
