"""Configuration for external-auth: strategy settings and logging."""

from .settings import (
    ChainedStrategyConfig,
    DevStrategyConfig,
    DevUserConfig,
    ExternalAuthSettings,
    HttpHeadersStrategyConfig,
    JwtStrategyConfig,
    StrategyConfig,
    get_settings,
)
from .logging_config import LoggingConfig, setup_logging, get_logger

__all__ = [
    "JwtStrategyConfig",
    "HttpHeadersStrategyConfig",
    "DevUserConfig",
    "DevStrategyConfig",
    "ChainedStrategyConfig",
    "StrategyConfig",
    "ExternalAuthSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
