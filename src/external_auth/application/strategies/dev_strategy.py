"""Fixed identity verification strategy for local development."""

import logging
from typing import Any

from ...core.entities import InternalUser
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEV_MODE_WARNING = "********** USING DEV MODE AUTHENTICATOR. DO NOT USE IN PRODUCTION **********"


class DevVerificationStrategy:
    """Always authenticates as one statically configured user.

    Credentials are ignored. A warning is logged on every call so the mode
    cannot go unnoticed in any log stream.
    """

    name = "dev"

    def __init__(self, user: InternalUser):
        if user is None:
            raise ConfigurationError(
                "A user must be configured for the dev authenticator",
                details={"strategy": self.name},
            )
        if not isinstance(user, InternalUser):
            raise ConfigurationError(
                f"Dev authenticator user must be an InternalUser, got {type(user).__name__}",
                details={"strategy": self.name},
            )
        self._user = user

    @property
    def user(self) -> InternalUser:
        """The configured user."""
        return self._user

    def verify(self, credentials: Any = None) -> InternalUser:
        """Return the configured user."""
        logger.warning(DEV_MODE_WARNING)
        return self._user

    def __repr__(self) -> str:
        """Debug representation."""
        return f"DevVerificationStrategy(user={self._user})"
