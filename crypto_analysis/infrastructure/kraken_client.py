"""Kraken public REST API client."""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

import httpx

from crypto_analysis.config import kraken_config
from crypto_analysis.domain.entities import PricePoint
from crypto_analysis.domain.errors import ExternalServiceError, SymbolNotFoundError
from crypto_analysis.domain.interfaces import PriceSource

logger = logging.getLogger(__name__)

SERVICE_NAME = "Kraken"

# 6-hour buckets starting 2019-01-21
OHLC_INTERVAL_MINUTES = 21600
OHLC_SINCE = 1548111600

# Number of leading buckets averaged as the listing price
OPENING_WINDOW = 4

# OHLC row layout: [time, open, high, low, close, vwap, volume, count]
TIME_INDEX = 0
CLOSE_INDEX = 4

UNKNOWN_PAIR_MARKERS = ("Unknown asset pair", "Invalid")


class KrakenPriceSource(PriceSource):
    """PriceSource backed by Kraken's OHLC endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = (base_url or kraken_config.BASE_URL).rstrip("/")
        self.timeout = timeout or kraken_config.TIMEOUT
        self._client = client or httpx.Client(timeout=self.timeout)

    def __enter__(self) -> "KrakenPriceSource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._client.close()

    def symbol_exists(self, symbol: str) -> bool:
        try:
            response = self._fetch_ohlc(symbol)
        except ExternalServiceError as e:
            logger.warning(f"Error checking symbol existence for {symbol}: {e}")
            return False

        errors = response.get("error") or []
        if any(marker in err for err in errors for marker in UNKNOWN_PAIR_MARKERS):
            return False
        return bool(response.get("result"))

    def get_historical_average(self, symbol: str) -> float:
        prices = self._close_prices(symbol)
        opening = prices[:OPENING_WINDOW]
        average = sum(opening) / len(opening)
        logger.debug(
            f"Historical average for {symbol}: {average} ({len(opening)} data points)"
        )
        return average

    def get_current_average(self, symbol: str) -> float:
        prices = self._close_prices(symbol)
        average = sum(prices) / len(prices)
        logger.debug(
            f"Current average for {symbol}: {average} ({len(prices)} data points)"
        )
        return average

    def get_price_history(self, symbol: str) -> List[PricePoint]:
        rows = self._ohlc_rows(self._fetch_ohlc(symbol), symbol)
        if rows is None:
            raise SymbolNotFoundError(symbol)
        try:
            return [
                PricePoint(
                    timestamp=datetime.fromtimestamp(int(row[TIME_INDEX]), tz=timezone.utc),
                    price=float(row[CLOSE_INDEX]),
                )
                for row in rows
            ]
        except (IndexError, TypeError, ValueError, OverflowError, OSError) as e:
            raise ExternalServiceError(SERVICE_NAME, e) from e

    def _close_prices(self, symbol: str) -> List[float]:
        rows = self._ohlc_rows(self._fetch_ohlc(symbol), symbol)
        try:
            prices = [float(row[CLOSE_INDEX]) for row in rows or []]
        except (IndexError, TypeError, ValueError) as e:
            raise ExternalServiceError(SERVICE_NAME, e) from e
        if not prices:
            raise SymbolNotFoundError(symbol)
        return prices

    def _fetch_ohlc(self, symbol: str) -> Dict[str, Any]:
        """GET the OHLC series, translating every transport fault."""
        url = f"{self.base_url}/OHLC"
        params = {
            "pair": f"{symbol}USD",
            "interval": OHLC_INTERVAL_MINUTES,
            "since": OHLC_SINCE,
        }
        try:
            response = self._client.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise ExternalServiceError(SERVICE_NAME, TimeoutError("Request timeout")) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ExternalServiceError(SERVICE_NAME, e) from e

        if not isinstance(data, dict) or not isinstance(data.get("result", {}), dict):
            raise ExternalServiceError(
                SERVICE_NAME, ValueError("Malformed OHLC response")
            )
        return data

    @staticmethod
    def _ohlc_rows(data: Dict[str, Any], symbol: str) -> Optional[List[list]]:
        """Pick the series for ``symbol``; Kraken keys vary (ETHUSD, XETHZUSD)."""
        result = data.get("result") or {}
        for key, rows in result.items():
            if key != "last" and symbol in key and "USD" in key:
                return rows
        return None
