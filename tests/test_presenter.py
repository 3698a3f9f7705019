"""
Presenter Tests - Unit Tests for RatePresenter

Covers activation, display state updates, the phase state machine,
state-change listeners and release of the interactor subscription.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- btcrate.application.presenter (RatePresenter)
- btcrate.application.interactor (RateInteractor)
- btcrate.adapters.providers.fixed (FixedRateService as service double)
"""
import asyncio
import gc

import pytest

from unittest.mock import Mock

from btcrate.adapters.providers.fixed import FixedRateService
from btcrate.application.interactor import RateInteractor
from btcrate.application.presenter import RatePresenter
from btcrate.domain.errors import FetchError, InvalidResponseError
from btcrate.domain.models import DisplayState, RatePhase


def _presenter(service):
    return RatePresenter(interactor=RateInteractor(service=service))


class TestRatePresenter:
    def test_initial_state(self):
        presenter = _presenter(FixedRateService(rate="1"))
        assert presenter.state == DisplayState(rate="")
        assert presenter.phase is RatePhase.IDLE

    def test_activate_success(self):
        presenter = _presenter(FixedRateService(rate="999.99"))

        asyncio.run(presenter.on_activate())

        assert presenter.state.rate == "999.99"
        assert presenter.phase is RatePhase.LOADED

    def test_activate_fetch_failure_leaves_blank(self):
        presenter = _presenter(FixedRateService(error=FetchError("HTTP 500", status_code=500)))

        asyncio.run(presenter.on_activate())

        assert presenter.state.rate == ""
        assert presenter.phase is RatePhase.LOADED

    def test_missing_currency_looks_like_failure(self):
        presenter = _presenter(FixedRateService(error=InvalidResponseError("no AUD")))

        asyncio.run(presenter.on_activate())

        assert presenter.state == DisplayState(rate="")

    def test_phase_is_loading_during_fetch(self):
        seen = []
        presenter = None

        class _Probe(FixedRateService):
            def fetch_rate(self):
                seen.append(presenter.phase)
                return super().fetch_rate()

        presenter = _presenter(_Probe(rate="3"))
        asyncio.run(presenter.on_activate())

        assert seen == [RatePhase.LOADING]

    def test_second_activation_refetches_last_write_wins(self):
        service = FixedRateService(rate="100")
        presenter = _presenter(service)
        listener = Mock()
        presenter.add_listener(listener)

        async def activate_twice():
            await presenter.on_activate()
            service.rate = "200"
            await presenter.on_activate()

        asyncio.run(activate_twice())

        assert service.calls == 2
        assert presenter.state.rate == "200"
        assert listener.call_count == 2
        listener.assert_called_with(DisplayState(rate="200"))

    def test_success_then_failure_clears_rate(self):
        service = FixedRateService(rate="100")
        presenter = _presenter(service)

        async def activate_twice():
            await presenter.on_activate()
            service.error = FetchError("down")
            await presenter.on_activate()

        asyncio.run(activate_twice())

        assert presenter.state.rate == ""

    def test_remove_listener(self):
        presenter = _presenter(FixedRateService(rate="1"))
        listener = Mock()
        remove = presenter.add_listener(listener)
        remove()
        remove()

        asyncio.run(presenter.on_activate())

        listener.assert_not_called()

    def test_close_stops_updates(self):
        interactor = RateInteractor(service=FixedRateService(rate="1"))
        presenter = RatePresenter(interactor=interactor)
        presenter.close()

        asyncio.run(interactor.fetch_rate())

        assert presenter.state.rate == ""
        assert interactor._subscription is None

    def test_closed_presenter_still_finishes_loading(self):
        presenter = _presenter(FixedRateService(rate="1"))
        presenter.close()

        asyncio.run(presenter.on_activate())

        assert presenter.phase is RatePhase.LOADED
        assert presenter.state.rate == ""

    def test_unexpected_error_still_finishes_loading(self):
        service = Mock()
        service.fetch_rate.side_effect = ZeroDivisionError()
        presenter = _presenter(service)

        with pytest.raises(ZeroDivisionError):
            asyncio.run(presenter.on_activate())

        assert presenter.phase is RatePhase.LOADED
        assert presenter.state.rate == ""

    def test_collected_presenter_releases_subscription(self):
        interactor = RateInteractor(service=FixedRateService(rate="1"))
        presenter = RatePresenter(interactor=interactor)
        assert interactor._subscription is not None

        del presenter
        gc.collect()

        assert interactor._subscription is None
        assert asyncio.run(interactor.fetch_rate()) == "1"
