"""ClickHouse implementation of the result store."""
from typing import Optional
from datetime import datetime, timezone
import logging

from crypto_analysis.domain.interfaces import ResultStore
from crypto_analysis.domain.entities import InvestmentResult
from crypto_analysis.repository.clickhouse_client import ClickHouseConnection

logger = logging.getLogger(__name__)

# ReplacingMergeTree keeps the row with the highest version per sorting key,
# so reads with FINAL see upsert semantics.
SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS analysis_results (
        symbol String,
        investment Float64,
        number_of_coins Float64,
        profit Float64,
        growth_factor Float64,
        lambos Float64,
        generation_date DateTime64(3, 'UTC')
    ) ENGINE = ReplacingMergeTree(generation_date)
    ORDER BY (symbol, investment)
    """,
    """
    CREATE TABLE IF NOT EXISTS opening_averages (
        symbol String,
        average Float64,
        updated_at DateTime64(3, 'UTC')
    ) ENGINE = ReplacingMergeTree(updated_at)
    ORDER BY symbol
    """,
    """
    CREATE TABLE IF NOT EXISTS query_log (
        created_at DateTime64(3, 'UTC'),
        symbol String,
        investment Float64
    ) ENGINE = MergeTree()
    ORDER BY (created_at, symbol)
    """,
]


def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ClickHouseResultStore(ResultStore):
    """ClickHouse implementation for results, opening averages and query log."""

    def __init__(self, connection: ClickHouseConnection):
        self._conn = connection

    def ensure_schema(self) -> None:
        """Create tables if they do not exist."""
        for statement in SCHEMA:
            self._conn.execute(statement)
        logger.info("ClickHouse schema ready")

    def find_cached_result(
        self, symbol: str, investment: float
    ) -> Optional[InvestmentResult]:
        query = """
        SELECT symbol, investment, number_of_coins, profit, growth_factor, lambos, generation_date
        FROM analysis_results FINAL
        WHERE symbol = %(symbol)s AND investment = %(investment)s
        LIMIT 1
        """
        result = self._conn.execute(query, {"symbol": symbol, "investment": investment})
        if not result:
            return None
        row = result[0]
        return InvestmentResult(
            symbol=row[0],
            investment=row[1],
            number_of_coins=row[2],
            profit=row[3],
            growth_factor=row[4],
            lambos=row[5],
            generation_date=_utc(row[6]),
        )

    def save_result(self, result: InvestmentResult) -> None:
        query = """
        INSERT INTO analysis_results
            (symbol, investment, number_of_coins, profit, growth_factor, lambos, generation_date)
        VALUES
        """
        self._conn.execute(
            query,
            [(
                result.symbol,
                result.investment,
                result.number_of_coins,
                result.profit,
                result.growth_factor,
                result.lambos,
                result.generation_date,
            )],
        )
        logger.debug(f"Saved analysis result for {result.symbol} ({result.investment})")

    def find_opening_average(self, symbol: str) -> Optional[float]:
        query = """
        SELECT average
        FROM opening_averages FINAL
        WHERE symbol = %(symbol)s
        LIMIT 1
        """
        result = self._conn.execute(query, {"symbol": symbol})
        if result:
            return result[0][0]
        return None

    def save_opening_average(self, symbol: str, average: float) -> None:
        query = """
        INSERT INTO opening_averages (symbol, average, updated_at)
        VALUES
        """
        self._conn.execute(query, [(symbol, average, datetime.now(timezone.utc))])
        logger.debug(f"Saved opening average for {symbol}: {average}")

    def log_query(self, symbol: str, investment: float) -> None:
        query = """
        INSERT INTO query_log (created_at, symbol, investment)
        VALUES
        """
        self._conn.execute(query, [(datetime.now(timezone.utc), symbol, investment)])
        logger.debug(f"Logged query for {symbol} ({investment})")
