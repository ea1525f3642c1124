"""external-auth: pluggable external authentication.

Verifies credentials issued by an external identity provider (a signed JWT,
headers injected by a trusted proxy, or a fixed development identity) and
maps them to an application principal.
"""

from .__version__ import __version__
from .core import (
    InternalUser,
    ExternalAuthError,
    AuthenticationDeniedError,
    AuthenticationError,
    InvalidTokenError,
    MissingCredentialsError,
    ConfigurationError,
    PublicKeyError,
    get_http_status_code,
    VerificationStrategy,
    Principal,
    PrincipalConverter,
    AuthenticationEventListener,
    AbstractAuthenticationEventListener,
    SigningKey,
    TokenClaims,
)
from .application import (
    ExternalAuthenticator,
    EventNotifier,
    LoggingEventListener,
    IdentityPrincipalConverter,
    CallablePrincipalConverter,
    JwtVerificationStrategy,
    HeaderFieldNames,
    HeaderFieldsVerificationStrategy,
    DevVerificationStrategy,
    ChainedVerificationStrategy,
    CredentialsExtractingStrategy,
    bearer_token_from_headers,
)
from .config import ExternalAuthSettings, get_settings, setup_logging
from .infrastructure import (
    build_authenticator,
    build_request_strategy,
    build_strategy,
    ExternalAuthDependency,
)

__all__ = [
    "__version__",
    
    # Core
    "InternalUser",
    "ExternalAuthError",
    "AuthenticationDeniedError",
    "AuthenticationError",
    "InvalidTokenError",
    "MissingCredentialsError",
    "ConfigurationError",
    "PublicKeyError",
    "get_http_status_code",
    "VerificationStrategy",
    "Principal",
    "PrincipalConverter",
    "AuthenticationEventListener",
    "AbstractAuthenticationEventListener",
    "SigningKey",
    "TokenClaims",
    
    # Pipeline
    "ExternalAuthenticator",
    "EventNotifier",
    "LoggingEventListener",
    "IdentityPrincipalConverter",
    "CallablePrincipalConverter",
    
    # Strategies
    "JwtVerificationStrategy",
    "HeaderFieldNames",
    "HeaderFieldsVerificationStrategy",
    "DevVerificationStrategy",
    "ChainedVerificationStrategy",
    "CredentialsExtractingStrategy",
    "bearer_token_from_headers",
    
    # Configuration
    "ExternalAuthSettings",
    "get_settings",
    "setup_logging",
    
    # Integration
    "build_strategy",
    "build_request_strategy",
    "build_authenticator",
    "ExternalAuthDependency",
]
