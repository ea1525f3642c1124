"""Principal conversion protocol contracts."""

from typing import Optional, Protocol, TypeVar, runtime_checkable

from ..entities import InternalUser


@runtime_checkable
class Principal(Protocol):
    """Minimal contract of an embedding application's identity type."""
    
    @property
    def name(self) -> str:
        """Principal name."""
        ...


P = TypeVar("P")


@runtime_checkable
class PrincipalConverter(Protocol[P]):
    """Protocol for mapping between internal users and application principals."""
    
    def to_internal_user(self, principal: P) -> Optional[InternalUser]:
        """Convert a principal back to an internal user.
        
        Args:
            principal: Principal supplied by the embedding application
            
        Returns:
            Internal user, or None if the principal did not originate from
            this library (for example one set by unrelated middleware)
        """
        ...
    
    def to_principal(self, user: InternalUser) -> P:
        """Convert an internal user to the application's principal.
        
        Must not fail for any valid internal user and must be side-effect free.
        """
        ...
