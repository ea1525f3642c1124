"""Verification strategy protocol contract."""

from typing import Protocol, TypeVar, runtime_checkable

from ..entities import InternalUser

C = TypeVar("C", contravariant=True)


@runtime_checkable
class VerificationStrategy(Protocol[C]):
    """Protocol for credential verification strategies.
    
    Defines ONLY the contract for turning raw credentials into an internal user.
    Implementations handle specific evidence (JWTs, proxy headers, fixed users).
    Implementations must be immutable after construction so one instance can
    serve concurrent requests.
    """
    
    name: str
    
    def verify(self, credentials: C) -> InternalUser:
        """Verify credentials and return the identity they assert.
        
        Args:
            credentials: Strategy-specific raw credentials
            
        Returns:
            Normalized internal user
            
        Raises:
            AuthenticationDeniedError: If credentials are processable but insufficient
            AuthenticationError: If credentials cannot be evaluated at all
        """
        ...
