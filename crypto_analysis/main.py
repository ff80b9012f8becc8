"""FastAPI application - minimal setup with dependency injection."""
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from crypto_analysis.api.errors import register_error_handlers
from crypto_analysis.api.routes import analysis, health
from crypto_analysis.config import app_config, clickhouse_config, server_config
from crypto_analysis.infrastructure.kraken_client import KrakenPriceSource
from crypto_analysis.repository.clickhouse_client import ClickHouseConnection
from crypto_analysis.repository.result_store import ClickHouseResultStore
from crypto_analysis.services.analysis_service import AnalysisService

logging.basicConfig(
    level=app_config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting application...")

    price_source = KrakenPriceSource()

    # Initialize database connection
    connection = ClickHouseConnection()

    try:
        connection.connect()
        store = ClickHouseResultStore(connection)
        if clickhouse_config.INIT_SCHEMA:
            store.ensure_schema()

        # Wire the service graph onto app state
        app.state.connection = connection
        app.state.analysis_service = AnalysisService(store, price_source)

        logger.info("Application started")
        yield
    finally:
        # Shutdown
        logger.info("Shutting down...")
        price_source.close()
        connection.disconnect()
        logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title="Crypto Analysis API",
    description="What would an investment made at a coin's listing be worth today",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration."""
    start = time.perf_counter()
    client = request.client.host if request.client else "unknown"
    logger.info(f"Request received: {request.method} {request.url.path} from {client}")
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.1f}ms"
        )
        raise
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration_ms:.1f}ms"
    )
    return response


register_error_handlers(app)

# Register routes
app.include_router(health.router)
app.include_router(analysis.router)


def serve() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "crypto_analysis.main:app",
        host=server_config.HOST,
        port=server_config.PORT,
        log_level=app_config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    serve()
