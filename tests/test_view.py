"""
View Tests - Unit Tests for RateLabelView and the Composition Root

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- btcrate.adapters.view.label (RateLabelView)
- btcrate.app (build_view, run, main)
"""
import asyncio
import io
import json

from unittest.mock import Mock, patch

from btcrate.adapters.providers.fixed import FixedRateService
from btcrate.adapters.view.label import RateLabelView
from btcrate.app import build_view, main, run
from btcrate.domain.errors import DecodeError


class TestRateLabelView:
    def test_text_before_appear_is_blank(self):
        view = build_view(service=FixedRateService(rate="1"), stream=io.StringIO())
        assert view.text == ""

    def test_appear_renders_then_updates(self):
        stream = io.StringIO()
        view = build_view(service=FixedRateService(rate="12345.67"), stream=stream)

        asyncio.run(view.appear())

        assert view.text == "12345.67"
        assert stream.getvalue() == "\n12345.67\n"

    def test_appear_activates_once(self):
        service = FixedRateService(rate="1")
        view = build_view(service=service, stream=io.StringIO())

        async def appear_three_times():
            await view.appear()
            await view.appear()
            await view.appear()

        asyncio.run(appear_three_times())

        assert service.calls == 1

    def test_failure_keeps_label_blank(self):
        stream = io.StringIO()
        view = build_view(service=FixedRateService(error=DecodeError("bad")), stream=stream)

        asyncio.run(view.appear())

        assert view.text == ""
        assert stream.getvalue() == "\n\n"

    def test_rerenders_on_every_state_change(self):
        stream = io.StringIO()
        service = FixedRateService(rate="1")
        view = build_view(service=service, stream=stream)

        async def appear_then_refresh():
            await view.appear()
            service.rate = "2"
            await view.presenter.on_activate()

        asyncio.run(appear_then_refresh())

        assert stream.getvalue().splitlines() == ["", "1", "2"]

    def test_close_detaches(self):
        stream = io.StringIO()
        view = build_view(service=FixedRateService(rate="1"), stream=stream)
        view.close()

        asyncio.run(view.presenter.on_activate())

        assert stream.getvalue() == ""
        assert view.text == "1"

    def test_defaults_to_stdout(self, capsys):
        presenter = Mock()
        presenter.state.rate = "42"
        view = RateLabelView(presenter)

        view.render()

        assert capsys.readouterr().out == "42\n"


class TestApp:
    def test_run_returns_final_text(self):
        view = build_view(service=FixedRateService(rate="5.5"), stream=io.StringIO())
        assert asyncio.run(run(view)) == "5.5"

    @patch('btcrate.app.setup_logging')
    @patch('btcrate.adapters.providers.coinbase.requests.get')
    def test_main_prints_rate(self, mock_get, mock_setup_logging, capsys):
        resp = Mock()
        resp.status_code = 200
        resp.content = json.dumps(
            {"data": {"currency": "BTC", "rates": {"AUD": "12345.67"}}}
        ).encode("utf-8")
        mock_get.return_value = resp

        main()

        mock_setup_logging.assert_called_once()
        assert "12345.67\n" in capsys.readouterr().out

    @patch('btcrate.app.setup_logging')
    @patch('btcrate.adapters.providers.coinbase.requests.get')
    def test_main_blank_on_server_error(self, mock_get, mock_setup_logging, capsys):
        resp = Mock()
        resp.status_code = 500
        resp.content = b""
        mock_get.return_value = resp

        main()

        assert capsys.readouterr().out == "\n\n"

    @patch('btcrate.adapters.providers.coinbase.requests.get')
    def test_main_keeps_logs_off_stdout(self, mock_get, monkeypatch, capsys, restore_root_logger):
        from btcrate.config import settings

        monkeypatch.setattr(settings, "log_stdout", False)
        monkeypatch.setattr(settings, "log_level", "INFO")
        monkeypatch.setattr(settings, "log_file", None)
        monkeypatch.setattr(settings, "log_dir", None)
        resp = Mock()
        resp.status_code = 200
        resp.content = json.dumps(
            {"data": {"currency": "BTC", "rates": {"AUD": "12345.67"}}}
        ).encode("utf-8")
        mock_get.return_value = resp

        main()

        captured = capsys.readouterr()
        assert captured.out == "\n12345.67\n"
        assert "BTC rate in AUD: 12345.67" in captured.err
