"""Pytest configuration and fixtures."""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest
from unittest.mock import MagicMock

from crypto_analysis.domain.entities import InvestmentResult, PricePoint
from crypto_analysis.domain.interfaces import PriceSource, ResultStore
from crypto_analysis.services.analysis_service import AnalysisService


class InMemoryResultStore(ResultStore):
    """Dict-backed store with the same upsert semantics as ClickHouse."""

    def __init__(self):
        self.results: Dict[Tuple[str, float], InvestmentResult] = {}
        self.opening_averages: Dict[str, float] = {}
        self.queries: List[Tuple[str, float]] = []

    def find_cached_result(self, symbol: str, investment: float) -> Optional[InvestmentResult]:
        return self.results.get((symbol, investment))

    def save_result(self, result: InvestmentResult) -> None:
        self.results[(result.symbol, result.investment)] = result

    def find_opening_average(self, symbol: str) -> Optional[float]:
        return self.opening_averages.get(symbol)

    def save_opening_average(self, symbol: str, average: float) -> None:
        self.opening_averages[symbol] = average

    def log_query(self, symbol: str, investment: float) -> None:
        self.queries.append((symbol, investment))


@pytest.fixture
def store():
    """Empty in-memory result store."""
    return InMemoryResultStore()


@pytest.fixture
def price_source():
    """Mock price source that lists every symbol."""
    source = MagicMock(spec=PriceSource)
    source.symbol_exists.return_value = True
    source.get_historical_average.return_value = 100.0
    source.get_current_average.return_value = 200.0
    source.get_price_history.return_value = [
        PricePoint(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), price=3000.0),
        PricePoint(timestamp=datetime(2024, 1, 2, tzinfo=timezone.utc), price=3100.0),
    ]
    return source


@pytest.fixture
def service(store, price_source):
    return AnalysisService(store, price_source)
