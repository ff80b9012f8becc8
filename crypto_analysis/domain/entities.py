"""Domain entities - core business objects."""
import math
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class InvestmentResult(BaseModel):
    """Outcome of a hypothetical investment made at a coin's listing."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    symbol: str
    investment: float
    number_of_coins: float
    profit: float
    growth_factor: float
    lambos: float
    generation_date: datetime

    def is_valid(self) -> bool:
        """Check that coins, profit and growth factor are finite numbers."""
        return (
            math.isfinite(self.number_of_coins)
            and math.isfinite(self.profit)
            and math.isfinite(self.growth_factor)
        )


class PricePoint(BaseModel):
    """Closing price of one time bucket."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    price: float

    def to_chart_format(self) -> Dict[str, Any]:
        """Convert to an x/y pair for charting libraries."""
        return {"x": self.timestamp.isoformat(), "y": self.price}
