# src/btcrate/adapters/view/label.py
"""
Rate Label View - Renders the Display State as One Line of Text

The view has no input handling, no error display and no loading indicator.
It shows presenter.state.rate, re-renders on every state change, and
triggers presenter activation the first time it appears.

Files that USE this module:
- btcrate.app (shows the label on stdout)
- tests.test_view (unit tests)

Files that this module USES:
- btcrate.application.presenter (RatePresenter)
- btcrate.domain.models (DisplayState)
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from btcrate.application.presenter import RatePresenter
from btcrate.domain.models import DisplayState


class RateLabelView:
    def __init__(self, presenter: RatePresenter, stream: Optional[TextIO] = None):
        """
        Args:
            presenter: Presenter whose state is rendered
            stream: Where rendered text goes (defaults to sys.stdout)
        """
        self.presenter = presenter
        self.stream = stream if stream is not None else sys.stdout
        self._appeared = False
        self._detach = presenter.add_listener(self._on_state_change)

    @property
    def text(self) -> str:
        return self.presenter.state.rate

    def render(self) -> str:
        """Write the current label text to the stream and return it."""
        text = self.text
        self.stream.write(text + "\n")
        self.stream.flush()
        return text

    async def appear(self) -> None:
        """Show the label; activates the presenter on the first call only."""
        if self._appeared:
            return
        self._appeared = True
        self.render()
        await self.presenter.on_activate()

    def close(self) -> None:
        self._detach()

    def _on_state_change(self, state: DisplayState) -> None:
        self.render()
