"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class ServerConfig:
    """HTTP server bind configuration."""
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))


class ClickHouseConfig:
    """ClickHouse connection configuration."""
    HOST: str = os.getenv("CLICKHOUSE_HOST", "localhost")
    PORT: int = int(os.getenv("CLICKHOUSE_PORT", "9000"))
    DATABASE: str = os.getenv("CLICKHOUSE_DB", "crypto_analysis")
    USER: str = os.getenv("CLICKHOUSE_USER", "default")
    PASSWORD: str = os.getenv("CLICKHOUSE_PASSWORD", "")
    INIT_SCHEMA: bool = _env_flag("CLICKHOUSE_INIT_SCHEMA", "true")


class KrakenConfig:
    """Kraken public API configuration."""
    BASE_URL: str = os.getenv("KRAKEN_URL", "https://api.kraken.com/0/public")
    TIMEOUT: float = float(os.getenv("KRAKEN_TIMEOUT", "10"))


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Singleton instances
server_config = ServerConfig()
clickhouse_config = ClickHouseConfig()
kraken_config = KrakenConfig()
app_config = AppConfig()
