"""
Configuration module for the transaction insights service.

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


def _get_list(key: str, default: str) -> List[str]:
    """Get comma separated list from environment variable."""
    return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


@dataclass
class DatasetConfig:
    """Remote dataset location and HTTP timeouts."""

    url: str = field(default_factory=lambda: os.getenv(
        "DATASET_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    ))
    connect_timeout: float = field(default_factory=lambda: _get_float("DATASET_CONNECT_TIMEOUT", 5.0))
    read_timeout: float = field(default_factory=lambda: _get_float("DATASET_READ_TIMEOUT", 15.0))


@dataclass
class PaginationConfig:
    """Defaults used when page/per_page are missing or unusable."""

    default_page: int = field(default_factory=lambda: _get_int("DEFAULT_PAGE", 1))
    default_per_page: int = field(default_factory=lambda: _get_int("DEFAULT_PER_PAGE", 10))


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _get_int("PORT", 3000))
    service_name: str = field(default_factory=lambda: os.getenv("SERVICE_NAME", "transaction-insights"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_allow_origins: List[str] = field(default_factory=lambda: _get_list("CORS_ALLOW_ORIGINS", "*"))


# Global config instances (lazy loaded)
_dataset_config = None
_pagination_config = None
_server_config = None


def get_dataset_config() -> DatasetConfig:
    """Get remote dataset configuration."""
    global _dataset_config
    if _dataset_config is None:
        _dataset_config = DatasetConfig()
    return _dataset_config


def get_pagination_config() -> PaginationConfig:
    """Get pagination defaults."""
    global _pagination_config
    if _pagination_config is None:
        _pagination_config = PaginationConfig()
    return _pagination_config


def get_server_config() -> ServerConfig:
    """Get HTTP server configuration."""
    global _server_config
    if _server_config is None:
        _server_config = ServerConfig()
    return _server_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _dataset_config, _pagination_config, _server_config
    _dataset_config = DatasetConfig()
    _pagination_config = PaginationConfig()
    _server_config = ServerConfig()
