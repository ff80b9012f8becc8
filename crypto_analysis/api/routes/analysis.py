"""Investment analysis endpoints."""
from fastapi import APIRouter, Depends
import logging

from crypto_analysis.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    InvestmentResultResponse,
    PriceHistoryRequest,
    PriceHistoryResponse,
)
from crypto_analysis.api.dependencies import (
    get_analysis_service,
    normalize_symbol,
    validate_investment,
)
from crypto_analysis.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["analysis"])


# Plain def: the service does blocking I/O, so FastAPI runs these in its threadpool.
@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    request: AnalyzeRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalyzeResponse:
    """What would ``investment`` USD put into ``symbol`` at listing be worth now."""
    symbol = normalize_symbol(request.symbol)
    investment = validate_investment(request.investment)

    result = service.analyze(symbol, investment)
    logger.info(f"Analyzed {symbol} ({investment}): profit={result.profit}")
    return AnalyzeResponse(result=InvestmentResultResponse.from_entity(result))


@router.post("/price-history", response_model=PriceHistoryResponse)
def get_price_history(
    request: PriceHistoryRequest,
    service: AnalysisService = Depends(get_analysis_service),
) -> PriceHistoryResponse:
    """Get the close price series for a symbol."""
    symbol = normalize_symbol(request.symbol)

    points = service.get_price_history(symbol)
    logger.info(f"Price history for {symbol}: {len(points)} points")
    return PriceHistoryResponse.from_points(symbol, points)
