"""Chained verification strategy."""

import logging
from typing import Any, List, Optional, Sequence

from ...core.entities import InternalUser
from ...core.exceptions import (
    AuthenticationDeniedError,
    AuthenticationError,
    ConfigurationError,
)
from ...core.protocols import VerificationStrategy

logger = logging.getLogger(__name__)


class ChainedVerificationStrategy:
    """Tries delegate strategies in order; the first success wins.

    Every delegate receives the same credentials. When all delegates fail:
        - if any delegate raised ``AuthenticationError``, the first such
          error is raised, since an unprocessable credential is a fault
          even if another scheme merely denied
        - otherwise the denial of the last delegate is raised
    Exceptions outside the library hierarchy count as errors.
    """

    name = "chained"

    def __init__(self, strategies: Sequence[VerificationStrategy]):
        if not strategies:
            raise ConfigurationError(
                "Chained authenticator requires at least one strategy",
                details={"strategy": self.name},
            )
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> Sequence[VerificationStrategy]:
        """Delegate strategies in evaluation order."""
        return self._strategies

    def verify(self, credentials: Any) -> InternalUser:
        """Verify credentials with each delegate until one succeeds.

        Raises:
            AuthenticationError: First error raised by any delegate, if all failed
            AuthenticationDeniedError: Last denial, if all delegates denied
        """
        first_error: Optional[AuthenticationError] = None
        denials: List[AuthenticationDeniedError] = []

        for position, strategy in enumerate(self._strategies):
            strategy_name = getattr(strategy, "name", type(strategy).__name__)
            try:
                user = strategy.verify(credentials)
            except AuthenticationDeniedError as e:
                logger.debug(f"Chained strategy [{position}:{strategy_name}] denied: {e.message}")
                denials.append(e)
                continue
            except AuthenticationError as e:
                logger.debug(f"Chained strategy [{position}:{strategy_name}] errored: {e.message}")
                if first_error is None:
                    first_error = e
                continue
            except Exception as e:
                logger.error(f"Unexpected error in chained strategy [{position}:{strategy_name}]: {e}")
                if first_error is None:
                    first_error = AuthenticationError(
                        f"Unexpected failure in strategy [{strategy_name}]",
                        details={"strategy": strategy_name},
                    )
                    first_error.__cause__ = e
                continue

            logger.debug(f"Chained strategy [{position}:{strategy_name}] succeeded")
            return user

        if first_error is not None:
            raise first_error
        raise denials[-1]

    def __repr__(self) -> str:
        """Debug representation."""
        return f"ChainedVerificationStrategy(strategies={list(self._strategies)})"
