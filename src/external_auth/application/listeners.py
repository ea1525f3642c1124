"""Built-in authentication event listeners."""

import logging
from typing import Optional

from ..core.entities import InternalUser
from ..core.exceptions import AuthenticationDeniedError, AuthenticationError
from ..core.protocols import AbstractAuthenticationEventListener


class LoggingEventListener(AbstractAuthenticationEventListener):
    """Writes one audit log record per authentication outcome."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("external_auth.audit")

    def on_success(self, user: InternalUser) -> None:
        self._logger.info(
            f"Authentication succeeded for username [{user.username}]",
            extra={"username": user.username, "outcome": "success"},
        )

    def on_denied(self, error: AuthenticationDeniedError) -> None:
        self._logger.info(
            f"Authentication denied: {error.message}",
            extra={"outcome": "denied", "error_details": error.details},
        )

    def on_error(self, error: AuthenticationError) -> None:
        self._logger.warning(
            f"Authentication error: {error.message}",
            extra={"outcome": "error", "error_details": error.details},
        )
