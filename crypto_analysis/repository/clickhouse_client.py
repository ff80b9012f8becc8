"""ClickHouse database connection management."""
from typing import List, Any, Optional
from clickhouse_driver import Client
import logging
import threading

from crypto_analysis.config import clickhouse_config

logger = logging.getLogger(__name__)


class ClickHouseConnection:
    """Manages a ClickHouse connection owned by the application lifespan.

    A single clickhouse_driver Client cannot run two queries at once, so
    every query goes through a lock shared by the request threads.
    """

    def __init__(
        self,
        host: str = None,
        port: int = None,
        database: str = None,
        user: str = None,
        password: str = None,
    ):
        self.host = host or clickhouse_config.HOST
        self.port = port or clickhouse_config.PORT
        self.database = database or clickhouse_config.DATABASE
        self.user = user or clickhouse_config.USER
        self.password = password or clickhouse_config.PASSWORD
        self._client: Optional[Client] = None
        self._lock = threading.Lock()

    def __enter__(self) -> "ClickHouseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()

    def connect(self) -> None:
        """Establish connection to ClickHouse."""
        try:
            self._client = Client(
                host=self.host,
                port=self.port,
                database=self.database,
                user=self.user,
                password=self.password,
            )
            logger.info(f"Connected to ClickHouse at {self.host}:{self.port}/{self.database}")
        except Exception as e:
            logger.error(f"Failed to connect to ClickHouse: {e}")
            raise

    def disconnect(self) -> None:
        """Close connection to ClickHouse."""
        with self._lock:
            if self._client:
                self._client.disconnect()
                self._client = None
                logger.info("Disconnected from ClickHouse")

    def execute(self, query: str, params: Optional[Any] = None) -> List[Any]:
        """Execute a query and return results.

        ``params`` is a dict for SELECT placeholders or a list of row tuples
        for ``INSERT ... VALUES``.
        """
        with self._lock:
            if not self._client:
                raise RuntimeError("Not connected to ClickHouse")
            return self._client.execute(query, params if params is not None else {})

    def ping(self) -> bool:
        """Round-trip a trivial query."""
        try:
            self.execute("SELECT 1")
            return True
        except Exception as e:
            logger.warning(f"ClickHouse ping failed: {e}")
            return False
