"""Authentication event listener protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import InternalUser
from ..exceptions import AuthenticationDeniedError, AuthenticationError


@runtime_checkable
class AuthenticationEventListener(Protocol):
    """Protocol for observers of authentication outcomes.
    
    Exactly one method is invoked per authentication attempt. Listeners are
    called synchronously on the request path and should return quickly.
    """
    
    def on_success(self, user: InternalUser) -> None:
        """Handle a successful authentication."""
        ...
    
    def on_denied(self, error: AuthenticationDeniedError) -> None:
        """Handle a denied authentication."""
        ...
    
    def on_error(self, error: AuthenticationError) -> None:
        """Handle an authentication that could not be evaluated."""
        ...


class AbstractAuthenticationEventListener:
    """Listener base class that ignores every event.
    
    Subclass and override only the outcomes of interest.
    """
    
    def on_success(self, user: InternalUser) -> None:
        pass
    
    def on_denied(self, error: AuthenticationDeniedError) -> None:
        pass
    
    def on_error(self, error: AuthenticationError) -> None:
        pass
