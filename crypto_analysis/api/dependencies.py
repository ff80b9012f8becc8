"""FastAPI dependency injection setup.

Services live on ``app.state``; the lifespan in ``crypto_analysis.main``
builds and tears them down.
"""
from fastapi import Request

from crypto_analysis.domain.errors import ValidationError
from crypto_analysis.repository.clickhouse_client import ClickHouseConnection
from crypto_analysis.services.analysis_service import AnalysisService


def get_analysis_service(request: Request) -> AnalysisService:
    """Get analysis service dependency."""
    service = getattr(request.app.state, "analysis_service", None)
    if service is None:
        raise RuntimeError("Services not initialized")
    return service


def get_connection(request: Request) -> ClickHouseConnection:
    """Get database connection."""
    connection = getattr(request.app.state, "connection", None)
    if connection is None:
        raise RuntimeError("Services not initialized")
    return connection


def normalize_symbol(symbol: str) -> str:
    """Strip and upper-case a symbol; reject empty ones."""
    if not symbol or not symbol.strip():
        raise ValidationError("Symbol is required")
    return symbol.strip().upper()


def validate_investment(investment: float) -> float:
    if not investment > 0:
        raise ValidationError("Investment must be a positive number")
    return investment
