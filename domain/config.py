"""
Configuration module for the Transaction Insights API.

All configuration values are loaded from environment variables with sensible defaults.
See .env.example for all available configuration options.
"""
import os
from dataclasses import dataclass, field
from typing import List


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.getenv(key, default))


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable ("1", "true", "yes" are truthy)."""
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes"}


def _default_database_url() -> str:
    # DATABASE_URL wins over the individual DB_* components
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "postgres")
    db_name = os.getenv("DB_NAME", "transactions")
    return os.getenv(
        "DATABASE_URL",
        f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"
    )


def _default_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class StoreConfig:
    """Transaction store connection settings."""

    database_url: str = field(default_factory=_default_database_url)
    echo: bool = field(default_factory=lambda: _get_bool("DB_ECHO", False))


@dataclass
class SeedConfig:
    """Remote seed dataset settings."""

    url: str = field(default_factory=lambda: os.getenv(
        "SEED_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    ))
    connect_timeout: float = field(default_factory=lambda: _get_float("SEED_CONNECT_TIMEOUT", 2.0))
    read_timeout: float = field(default_factory=lambda: _get_float("SEED_READ_TIMEOUT", 10.0))


@dataclass
class PaginationConfig:
    """Defaults and limits for the transaction list."""

    default_per_page: int = field(default_factory=lambda: _get_int("DEFAULT_PER_PAGE", 10))
    max_per_page: int = field(default_factory=lambda: _get_int("MAX_PER_PAGE", 100))


@dataclass
class AppConfig:
    """HTTP application settings."""

    service_name: str = field(default_factory=lambda: os.getenv("SERVICE_NAME", "transaction-insights"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_allow_origins: List[str] = field(default_factory=_default_cors_origins)


# Global config instances (lazy loaded)
_store_config = None
_seed_config = None
_pagination_config = None
_app_config = None


def get_store_config() -> StoreConfig:
    """Get transaction store configuration."""
    global _store_config
    if _store_config is None:
        _store_config = StoreConfig()
    return _store_config


def get_seed_config() -> SeedConfig:
    """Get seed source configuration."""
    global _seed_config
    if _seed_config is None:
        _seed_config = SeedConfig()
    return _seed_config


def get_pagination_config() -> PaginationConfig:
    """Get pagination configuration."""
    global _pagination_config
    if _pagination_config is None:
        _pagination_config = PaginationConfig()
    return _pagination_config


def get_app_config() -> AppConfig:
    """Get HTTP application configuration."""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _store_config, _seed_config, _pagination_config, _app_config
    _store_config = StoreConfig()
    _seed_config = SeedConfig()
    _pagination_config = PaginationConfig()
    _app_config = AppConfig()
