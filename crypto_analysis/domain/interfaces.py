"""Capability interfaces (Ports) - abstraction for price data and persistence."""
from abc import ABC, abstractmethod
from typing import List, Optional

from crypto_analysis.domain.entities import InvestmentResult, PricePoint


class PriceSource(ABC):
    """Interface for an exchange's historical price data.

    Implementations apply a bounded timeout to every call and raise
    ``ExternalServiceError`` for transport failures.
    """

    @abstractmethod
    def symbol_exists(self, symbol: str) -> bool:
        """Check whether the exchange lists the symbol. Never raises for unknown symbols."""
        pass

    @abstractmethod
    def get_historical_average(self, symbol: str) -> float:
        """Get the average close price near the symbol's listing."""
        pass

    @abstractmethod
    def get_current_average(self, symbol: str) -> float:
        """Get the average close price over the whole available series."""
        pass

    @abstractmethod
    def get_price_history(self, symbol: str) -> List[PricePoint]:
        """Get the close price series in chronological order."""
        pass


class ResultStore(ABC):
    """Interface for analysis results, opening averages and the query log."""

    @abstractmethod
    def find_cached_result(
        self, symbol: str, investment: float
    ) -> Optional[InvestmentResult]:
        """Find the stored result for a (symbol, investment) pair."""
        pass

    @abstractmethod
    def save_result(self, result: InvestmentResult) -> None:
        """Upsert a result keyed by (symbol, investment)."""
        pass

    @abstractmethod
    def find_opening_average(self, symbol: str) -> Optional[float]:
        """Find the cached opening average price for a symbol."""
        pass

    @abstractmethod
    def save_opening_average(self, symbol: str, average: float) -> None:
        """Upsert the opening average price for a symbol."""
        pass

    @abstractmethod
    def log_query(self, symbol: str, investment: float) -> None:
        """Append a query to the audit log."""
        pass
