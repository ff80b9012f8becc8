"""Investment calculation - pure function, no I/O."""
import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from crypto_analysis.domain.entities import InvestmentResult

# Price of one Lamborghini in USD
LAMBO_PRICE = 200000


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-style division: x/0 gives +/-inf and 0/0 gives nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _round_half_up(value: float, places: int) -> float:
    """Round ties away from zero on the exact binary value; non-finite passes through."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate(
    symbol: str, investment: float, start_price: float, end_price: float
) -> InvestmentResult:
    """Compute what ``investment`` bought at ``start_price`` is worth at ``end_price``.

    A zero ``start_price`` does not raise; it yields non-finite values that
    ``InvestmentResult.is_valid`` rejects.
    """
    number_of_coins = _divide(investment, start_price)
    profit = number_of_coins * end_price - investment
    growth_factor = _divide(profit, investment)
    lambos = profit / LAMBO_PRICE

    return InvestmentResult(
        symbol=symbol,
        investment=investment,
        number_of_coins=number_of_coins,
        profit=_round_half_up(profit, 2),
        growth_factor=_round_half_up(growth_factor, 4),
        lambos=_round_half_up(lambos, 4),
        generation_date=datetime.now(timezone.utc),
    )
