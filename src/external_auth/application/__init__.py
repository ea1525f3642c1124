"""Authentication application layer.

The authentication pipeline, its event notifier and principal converters,
plus the concrete verification strategies.
"""

from .authenticator import ExternalAuthenticator
from .converters import CallablePrincipalConverter, IdentityPrincipalConverter
from .listeners import LoggingEventListener
from .notifier import EventNotifier
from .strategies import (
    ChainedVerificationStrategy,
    CredentialsExtractingStrategy,
    DevVerificationStrategy,
    HeaderFieldNames,
    HeaderFieldsVerificationStrategy,
    JwtVerificationStrategy,
    bearer_token_from_headers,
)

__all__ = [
    # Pipeline
    "ExternalAuthenticator",
    "EventNotifier",
    "LoggingEventListener",
    
    # Converters
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
]
