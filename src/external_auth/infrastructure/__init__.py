"""Infrastructure: configuration driven factories and web framework integration."""

from .factories import (
    StrategyFactory,
    build_authenticator,
    build_request_strategy,
    build_strategy,
)
from .fastapi import AuthDependencyError, ExternalAuthDependency

__all__ = [
    "StrategyFactory",
    "build_strategy",
    "build_request_strategy",
    "build_authenticator",
    "AuthDependencyError",
    "ExternalAuthDependency",
]
