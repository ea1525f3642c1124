"""Principal converters."""

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from ..core.entities import InternalUser

logger = logging.getLogger(__name__)

P = TypeVar("P")


class IdentityPrincipalConverter:
    """Uses the internal user directly as the application's principal."""

    def to_internal_user(self, principal: Any) -> Optional[InternalUser]:
        """Return the principal if it is an internal user, otherwise None."""
        if isinstance(principal, InternalUser):
            return principal
        return None

    def to_principal(self, user: InternalUser) -> InternalUser:
        """Return the user unchanged."""
        return user


class CallablePrincipalConverter(Generic[P]):
    """Builds a converter from plain conversion functions.

    Args:
        to_principal: Total function from internal user to principal
        to_internal_user: Optional reverse function; without it, and whenever
            it raises, principals are treated as foreign
    """

    def __init__(
        self,
        to_principal: Callable[[InternalUser], P],
        to_internal_user: Optional[Callable[[P], Optional[InternalUser]]] = None,
    ):
        self._to_principal = to_principal
        self._to_internal_user = to_internal_user

    def to_internal_user(self, principal: P) -> Optional[InternalUser]:
        """Convert principal back to an internal user, None if not possible."""
        if self._to_internal_user is None:
            return None
        try:
            return self._to_internal_user(principal)
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            logger.debug(f"Principal {principal!r} is not convertible to an internal user: {e}")
            return None

    def to_principal(self, user: InternalUser) -> P:
        """Convert internal user to principal."""
        return self._to_principal(user)
