"""Authentication-specific exceptions for external-auth.

Denials and infrastructure errors are disjoint branches of the hierarchy:
catching one never catches the other.
"""

from .base import ExternalAuthError


class AuthenticationDeniedError(ExternalAuthError):
    """Raised when credentials were processable but insufficient.
    
    For example a verified JWT that lacks a required identity claim, or proxy
    headers that omit the username. Surfaced to callers as "not authenticated".
    """
    pass


class AuthenticationError(ExternalAuthError):
    """Raised when a strategy cannot evaluate the credentials at all."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT cannot be parsed or its signature does not verify."""
    pass


class MissingCredentialsError(AuthenticationError):
    """Raised when no credentials were handed to a strategy."""
    pass


class ConfigurationError(ExternalAuthError):
    """Raised when a strategy is built from unusable configuration."""
    pass


class PublicKeyError(ConfigurationError):
    """Raised when public signing key material cannot be decoded."""
    pass
