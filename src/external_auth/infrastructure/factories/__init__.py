"""Factories that build strategies and pipelines from configuration."""

from .strategy_factory import (
    StrategyFactory,
    build_authenticator,
    build_request_strategy,
    build_strategy,
)

__all__ = [
    "StrategyFactory",
    "build_strategy",
    "build_request_strategy",
    "build_authenticator",
]
