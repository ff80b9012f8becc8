"""API request/response schemas (DTOs)."""
from datetime import datetime
from typing import List
from pydantic import BaseModel

from crypto_analysis.domain.entities import InvestmentResult, PricePoint


# Request models
class AnalyzeRequest(BaseModel):
    """Request for a hypothetical investment analysis."""
    symbol: str
    investment: float


class PriceHistoryRequest(BaseModel):
    """Request for a symbol's price history."""
    symbol: str


# Response models
class InvestmentResultResponse(BaseModel):
    """Single investment result."""
    symbol: str
    investment: float
    number_of_coins: float
    profit: float
    growth_factor: float
    lambos: float
    generation_date: datetime

    @classmethod
    def from_entity(cls, result: InvestmentResult) -> "InvestmentResultResponse":
        return cls.model_validate(result.model_dump())


class AnalyzeResponse(BaseModel):
    """Response for an analysis."""
    result: InvestmentResultResponse


class PricePointResponse(BaseModel):
    """Single price point."""
    timestamp: datetime
    price: float


class PriceHistoryResponse(BaseModel):
    """Response for a price history."""
    symbol: str
    points: List[PricePointResponse]
    count: int

    @classmethod
    def from_points(cls, symbol: str, points: List[PricePoint]) -> "PriceHistoryResponse":
        return cls(
            symbol=symbol,
            points=[PricePointResponse(timestamp=p.timestamp, price=p.price) for p in points],
            count=len(points),
        )


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    code: str
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    database: str
