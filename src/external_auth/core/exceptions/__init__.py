"""Authentication exceptions.

Three outcome kinds: denial (credentials insufficient), error (credentials
not processable) and configuration error (strategy could not be built).
"""

from .base import ExternalAuthError
from .auth import (
    AuthenticationDeniedError,
    AuthenticationError,
    InvalidTokenError,
    MissingCredentialsError,
    ConfigurationError,
    PublicKeyError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "ExternalAuthError",
    "AuthenticationDeniedError",
    "AuthenticationError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "ConfigurationError",
    "PublicKeyError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
