# src/btcrate/adapters/providers/coinbase.py
"""
Coinbase API Service for BTC Exchange Rates

This module implements the Coinbase exchange-rates client. One call makes
one GET request; there is no caching and no retry.

Files that USE this module:
- btcrate.app (CoinbaseRateService is the production service)
- tests.test_providers (unit tests)

Files that this module USES:
- btcrate.adapters.providers.base (RateService interface)
- btcrate.domain.models (ExchangeRateResponse for decoding)
- btcrate.domain.errors (service error taxonomy)
- btcrate.config (settings for endpoint, currencies and timeout)
"""
import logging
import urllib.parse
import requests
from typing import Optional

from pydantic import ValidationError

from btcrate.adapters.providers.base import RateService
from btcrate.config import settings
from btcrate.domain.errors import (
    DecodeError,
    FetchError,
    InvalidResponseError,
    InvalidURLError,
)
from btcrate.domain.models import ExchangeRateResponse

log = logging.getLogger(__name__)


class CoinbaseRateService(RateService):

    def __init__(
        self,
        base_url: Optional[str] = None,
        base_currency: Optional[str] = None,
        target_currency: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Coinbase rate service.

        Args:
            base_url: Optional custom endpoint (defaults to settings.exchange_rates_url)
            base_currency: Currency being priced (defaults to settings.base_currency)
            target_currency: Currency to read from the rates mapping (defaults to settings.target_currency)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds,
                     which is None: no timeout)
        """
        self.base_url = base_url or settings.exchange_rates_url
        self.base_currency = base_currency or settings.base_currency
        self.target_currency = target_currency or settings.target_currency
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    def request_url(self) -> str:
        """
        Build the full request URL, e.g.
        https://api.coinbase.com/v2/exchange-rates?currency=BTC

        Raises:
            InvalidURLError: If the endpoint has no scheme, an unsupported scheme, or no host
        """
        try:
            prepared = requests.Request(
                "GET", self.base_url, params={"currency": self.base_currency}
            ).prepare()
        except requests.exceptions.RequestException as e:
            log.error("Cannot build Coinbase request URL from %r: %s", self.base_url, e)
            raise InvalidURLError(f"Invalid exchange rates URL {self.base_url!r}: {e}") from e
        if urllib.parse.urlparse(prepared.url).scheme not in ("http", "https"):
            log.error("Unsupported scheme in exchange rates URL %r", self.base_url)
            raise InvalidURLError(f"Invalid exchange rates URL {self.base_url!r}: not http(s)")
        return prepared.url

    def fetch_rate(self) -> str:
        """
        Get the base→target rate from Coinbase.

        Returns:
            Decimal string exactly as Coinbase returns it (e.g. "98765.4321")

        Raises:
            InvalidURLError: If the request URL cannot be built
            FetchError: If the request fails or the status is not 200
            DecodeError: If the body is not the expected JSON envelope
            InvalidResponseError: If the target currency is missing from the rates
        """
        url = self.request_url()

        try:
            log.debug("Fetching %s rates from %s", self.base_currency, url)
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("Coinbase API timeout after %s seconds", self.timeout)
            raise FetchError(f"Coinbase API timeout after {self.timeout}s") from e
        except (requests.exceptions.InvalidURL, ValueError) as e:
            # urllib3 rejects some hosts (e.g. labels over 63 chars) only at send time
            log.error("Coinbase request URL rejected by HTTP client %r: %s", url, e)
            raise InvalidURLError(f"Invalid exchange rates URL {url!r}: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Coinbase API request failed (network/connection error): %s", e)
            raise FetchError(f"Coinbase API request failed: {e}") from e

        if resp.status_code != 200:
            log.warning("Coinbase API returned HTTP %d", resp.status_code)
            raise FetchError(
                f"Coinbase API returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            decoded = ExchangeRateResponse.model_validate_json(resp.content)
        except ValidationError as e:
            log.error("Coinbase API returned an unexpected body: %s", e)
            raise DecodeError(f"Coinbase API response could not be decoded: {e}") from e

        rate = decoded.data.rates.get(self.target_currency)
        if rate is None:
            log.error(
                "Coinbase %s rates have no %s entry", decoded.data.currency, self.target_currency
            )
            raise InvalidResponseError(
                f"Coinbase response missing 'data.rates.{self.target_currency}' field"
            )

        log.info("%s rate in %s: %s", self.base_currency, self.target_currency, rate)
        return rate
