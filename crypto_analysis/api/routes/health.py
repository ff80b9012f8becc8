"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from crypto_analysis.api.dependencies import get_connection
from crypto_analysis.api.schemas import HealthResponse
from crypto_analysis.repository.clickhouse_client import ClickHouseConnection

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(
    connection: ClickHouseConnection = Depends(get_connection),
) -> HealthResponse:
    """Health check endpoint."""
    database_up = connection.ping()
    return HealthResponse(
        status="healthy" if database_up else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="up" if database_up else "down",
    )
