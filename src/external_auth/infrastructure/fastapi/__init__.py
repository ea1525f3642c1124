"""FastAPI integration."""

from .dependencies import AuthDependencyError, ExternalAuthDependency, collect_headers

__all__ = [
    "AuthDependencyError",
    "ExternalAuthDependency",
    "collect_headers",
]
