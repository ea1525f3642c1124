"""Authentication core protocols.

Contracts between the authentication pipeline and its pluggable parts.
"""

from .verification_strategy import VerificationStrategy
from .principal_converter import Principal, PrincipalConverter
from .event_listener import AuthenticationEventListener, AbstractAuthenticationEventListener

__all__ = [
    "VerificationStrategy",
    "Principal",
    "PrincipalConverter",
    "AuthenticationEventListener",
    "AbstractAuthenticationEventListener",
]
