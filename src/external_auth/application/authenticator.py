"""Authentication pipeline."""

import logging
from typing import Generic, Iterable, Optional, Tuple, TypeVar

from ..core.entities import InternalUser
from ..core.exceptions import AuthenticationDeniedError, AuthenticationError
from ..core.protocols import (
    AuthenticationEventListener,
    PrincipalConverter,
    VerificationStrategy,
)
from .converters import IdentityPrincipalConverter
from .notifier import EventNotifier

logger = logging.getLogger(__name__)

C = TypeVar("C")
P = TypeVar("P")


class ExternalAuthenticator(Generic[C, P]):
    """Strategy-agnostic authentication pipeline.

    Composes a verification strategy, a principal converter and an event
    notifier into a single ``authenticate`` operation with three outcomes:

        - success: listeners get ``on_success``, the principal is returned
        - denial: listeners get ``on_denied``, ``None`` is returned
        - error: listeners get ``on_error``, the error is raised

    Each call is exactly one verification attempt; there are no retries.
    The pipeline keeps no per-request state and may be shared between
    concurrent requests.
    """

    def __init__(
        self,
        strategy: VerificationStrategy[C],
        converter: Optional[PrincipalConverter[P]] = None,
        listeners: Iterable[AuthenticationEventListener] = (),
        notifier: Optional[EventNotifier] = None,
    ):
        """Initialize authentication pipeline.

        Args:
            strategy: Strategy that verifies the raw credentials
            converter: Maps internal users to principals, identity if None
            listeners: Initial listeners, ignored if ``notifier`` is given
            notifier: Shared notifier to use instead of a private one
        """
        self._strategy = strategy
        self._converter = converter if converter is not None else IdentityPrincipalConverter()
        # EventNotifier defines __len__, so an empty one is falsy
        self._notifier = notifier if notifier is not None else EventNotifier(listeners)

    @property
    def strategy(self) -> VerificationStrategy[C]:
        """Configured verification strategy."""
        return self._strategy

    @property
    def converter(self) -> PrincipalConverter[P]:
        """Configured principal converter."""
        return self._converter

    @property
    def listeners(self) -> Tuple[AuthenticationEventListener, ...]:
        """Registered listeners in notification order."""
        return self._notifier.listeners

    def add_listener(self, listener: AuthenticationEventListener) -> None:
        """Register a listener."""
        self._notifier.add_listener(listener)

    def remove_listener(self, listener: AuthenticationEventListener) -> bool:
        """Unregister a listener; returns False if it was not registered."""
        return self._notifier.remove_listener(listener)

    def authenticate(self, credentials: C) -> Optional[P]:
        """Authenticate credentials and return the principal they assert.

        Args:
            credentials: Raw credentials understood by the strategy

        Returns:
            Principal on success, None if authentication was denied

        Raises:
            AuthenticationError: If the credentials could not be evaluated
        """
        strategy_name = getattr(self._strategy, "name", type(self._strategy).__name__)

        try:
            user = self._strategy.verify(credentials)
        except AuthenticationDeniedError as e:
            logger.debug(f"Authentication via [{strategy_name}] denied: {e.message}")
            self._notifier.notify_denied(e)
            return None
        except AuthenticationError as e:
            logger.debug(f"Authentication via [{strategy_name}] errored: {e.message}")
            self._notifier.notify_error(e)
            raise
        except Exception as e:
            logger.error(f"Unexpected failure in strategy [{strategy_name}]: {e}")
            error = AuthenticationError(
                f"Unexpected failure in strategy [{strategy_name}]",
                details={"strategy": strategy_name},
            )
            self._notifier.notify_error(error)
            raise error from e

        self._notifier.notify_success(user)
        return self._converter.to_principal(user)

    def to_internal_user(self, principal: P) -> Optional[InternalUser]:
        """Recover the internal user behind a principal, if it came from here."""
        return self._converter.to_internal_user(principal)

    def __repr__(self) -> str:
        """Debug representation."""
        return (
            f"ExternalAuthenticator(strategy={self._strategy!r}, "
            f"converter={type(self._converter).__name__}, listeners={len(self._notifier)})"
        )
