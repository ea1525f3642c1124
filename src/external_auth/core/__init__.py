"""Authentication core.

Entities, value objects, exceptions and protocols shared by every strategy.
"""

from .entities import InternalUser
from .exceptions import (
    ExternalAuthError,
    AuthenticationDeniedError,
    AuthenticationError,
    InvalidTokenError,
    MissingCredentialsError,
    ConfigurationError,
    PublicKeyError,
    get_http_status_code,
)
from .protocols import (
    VerificationStrategy,
    Principal,
    PrincipalConverter,
    AuthenticationEventListener,
    AbstractAuthenticationEventListener,
)
from .value_objects import SigningKey, TokenClaims

__all__ = [
    # Entities
    "InternalUser",
    
    # Exceptions
    "ExternalAuthError",
    "AuthenticationDeniedError",
    "AuthenticationError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "ConfigurationError",
    "PublicKeyError",
    "get_http_status_code",
    
    # Protocols
    "VerificationStrategy",
    "Principal",
    "PrincipalConverter",
    "AuthenticationEventListener",
    "AbstractAuthenticationEventListener",
    
    # Value Objects
    "SigningKey",
    "TokenClaims",
]
