"""Authentication event notifier."""

import logging
import threading
from typing import Callable, Iterable, Tuple

from ..core.entities import InternalUser
from ..core.exceptions import AuthenticationDeniedError, AuthenticationError
from ..core.protocols import AuthenticationEventListener

logger = logging.getLogger(__name__)


class EventNotifier:
    """Fans authentication outcomes out to registered listeners.
    
    Listeners are held in an immutable tuple that is replaced under a lock
    on add/remove (copy-on-write). Notification iterates the snapshot current
    at call time without locking, so registration never races with
    in-flight requests.
    
    A listener that raises is logged and skipped; the remaining listeners
    are still notified and the exception never reaches the caller.
    """
    
    def __init__(self, listeners: Iterable[AuthenticationEventListener] = ()):
        self._lock = threading.Lock()
        self._listeners: Tuple[AuthenticationEventListener, ...] = tuple(listeners)
    
    @property
    def listeners(self) -> Tuple[AuthenticationEventListener, ...]:
        """Snapshot of registered listeners in registration order."""
        return self._listeners
    
    def add_listener(self, listener: AuthenticationEventListener) -> None:
        """Register a listener at the end of the notification order."""
        with self._lock:
            self._listeners = self._listeners + (listener,)
    
    def remove_listener(self, listener: AuthenticationEventListener) -> bool:
        """Unregister the first occurrence of a listener.
        
        Returns:
            True if the listener was registered, False otherwise
        """
        with self._lock:
            listeners = list(self._listeners)
            try:
                listeners.remove(listener)
            except ValueError:
                return False
            self._listeners = tuple(listeners)
            return True
    
    def notify_success(self, user: InternalUser) -> None:
        """Invoke ``on_success`` on every listener."""
        self._notify("on_success", lambda listener: listener.on_success(user))
    
    def notify_denied(self, error: AuthenticationDeniedError) -> None:
        """Invoke ``on_denied`` on every listener."""
        self._notify("on_denied", lambda listener: listener.on_denied(error))
    
    def notify_error(self, error: AuthenticationError) -> None:
        """Invoke ``on_error`` on every listener."""
        self._notify("on_error", lambda listener: listener.on_error(error))
    
    def _notify(
        self,
        event_name: str,
        invoke: Callable[[AuthenticationEventListener], None],
    ) -> None:
        for listener in self._listeners:
            try:
                invoke(listener)
            except Exception:
                logger.exception(
                    f"Authentication event listener {type(listener).__name__}.{event_name} failed"
                )
    
    def __len__(self) -> int:
        return len(self._listeners)
