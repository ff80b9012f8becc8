"""Investment analysis business logic."""
from typing import List
import logging

from crypto_analysis.domain.calculator import calculate
from crypto_analysis.domain.entities import InvestmentResult, PricePoint
from crypto_analysis.domain.errors import SymbolNotFoundError
from crypto_analysis.domain.interfaces import PriceSource, ResultStore

logger = logging.getLogger(__name__)


class AnalysisService:
    """Answers what an investment made at a coin's listing would be worth today.

    Holds no state of its own; the store and the price source are injected.
    """

    def __init__(self, store: ResultStore, price_source: PriceSource):
        self._store = store
        self._price_source = price_source

    def analyze(self, symbol: str, investment: float) -> InvestmentResult:
        """Analyze a hypothetical investment of ``investment`` USD in ``symbol``.

        Raises:
            SymbolNotFoundError: the exchange does not list the symbol, or
                the computed result is not finite.
            ExternalServiceError: the price source failed.
        """
        self._store.log_query(symbol, investment)

        self._ensure_listed(symbol)

        start_price = self._opening_average(symbol)
        end_price = self._price_source.get_current_average(symbol)

        result = calculate(symbol, investment, start_price, end_price)
        if not result.is_valid():
            logger.warning(
                f"Discarding non-finite result for {symbol}: "
                f"start={start_price}, end={end_price}"
            )
            raise SymbolNotFoundError(symbol, reason=SymbolNotFoundError.DEGENERATE_RESULT)

        self._store.save_result(result)
        return result

    def get_price_history(self, symbol: str) -> List[PricePoint]:
        """Get the close price series for charting."""
        self._ensure_listed(symbol)
        return self._price_source.get_price_history(symbol)

    def _ensure_listed(self, symbol: str) -> None:
        if not self._price_source.symbol_exists(symbol):
            raise SymbolNotFoundError(symbol)

    def _opening_average(self, symbol: str) -> float:
        """Read-through cache for the listing-time price."""
        average = self._store.find_opening_average(symbol)
        if average is None:
            average = self._price_source.get_historical_average(symbol)
            self._store.save_opening_average(symbol, average)
            logger.info(f"Cached opening average for {symbol}: {average}")
        return average
