"""Credential extraction adapter for verification strategies."""

import logging
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from ...core.entities import InternalUser
from ...core.exceptions import AuthenticationDeniedError
from ...core.protocols import VerificationStrategy

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer"


def bearer_token_from_headers(
    headers: Optional[Mapping[str, Union[str, Sequence[str]]]]
) -> Optional[str]:
    """Extract the token of an ``Authorization: Bearer <token>`` header.

    Args:
        headers: Header name to values mapping (names are case-insensitive)

    Returns:
        The token, or None if there is no bearer authorization header
    """
    if not headers:
        return None

    for header_name, values in headers.items():
        if values is None or header_name.lower() != "authorization":
            continue
        if isinstance(values, str):
            values = [values]
        for value in values:
            if not isinstance(value, str):
                continue
            parts = value.split()
            if len(parts) == 2 and parts[0].lower() == BEARER_PREFIX:
                return parts[1]
            logger.debug("Authorization header is not a bearer token")
    return None


class CredentialsExtractingStrategy:
    """Adapts a strategy to another credential type.

    The extractor pulls the delegate's credentials out of the outer ones
    (for example a bearer token out of request headers), which lets
    strategies with different credential types share one chain. If the
    extractor finds nothing, the attempt is denied.
    """

    def __init__(
        self,
        strategy: VerificationStrategy,
        extractor: Callable[[Any], Any],
        name: Optional[str] = None,
    ):
        self._strategy = strategy
        self._extractor = extractor
        self.name = name or getattr(strategy, "name", type(strategy).__name__)

    @property
    def strategy(self) -> VerificationStrategy:
        """Wrapped strategy."""
        return self._strategy

    def verify(self, credentials: Any) -> InternalUser:
        """Extract inner credentials and verify them with the wrapped strategy."""
        extracted = self._extractor(credentials)
        if extracted is None:
            logger.info(f"Authentication denied - no credentials for strategy [{self.name}]")
            raise AuthenticationDeniedError(
                f"No credentials for strategy [{self.name}]",
                details={"strategy": self.name},
            )
        return self._strategy.verify(extracted)

    def __repr__(self) -> str:
        """Debug representation."""
        return f"CredentialsExtractingStrategy(name={self.name}, strategy={self._strategy!r})"
