"""FastAPI authentication dependencies."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from fastapi import HTTPException, Request, status

from ...application import ExternalAuthenticator
from ...config.settings import ExternalAuthSettings
from ...core.exceptions import AuthenticationError, get_http_status_code
from ...core.protocols import AuthenticationEventListener, PrincipalConverter
from ..factories import build_authenticator

logger = logging.getLogger(__name__)


class AuthDependencyError(HTTPException):
    """Base exception for authentication dependencies."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_401_UNAUTHORIZED,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


def collect_headers(request: Request) -> Dict[str, List[str]]:
    """Collect request headers into a name to values mapping.

    Repeated headers keep every value in arrival order. Names are lower case.
    """
    headers: Dict[str, List[str]] = {}
    for name, value in request.headers.items():
        headers.setdefault(name, []).append(value)
    return headers


class ExternalAuthDependency:
    """Callable FastAPI dependency that authenticates the current request.

    The authenticator must take a header mapping as credentials, which is
    what ``build_authenticator`` produces by default. On success the
    principal is returned and also stored on ``request.state`` together
    with the username, for audit logging further down the stack.

    Usage::

        authenticate = ExternalAuthDependency.from_settings(get_settings())

        @app.get("/me")
        def me(user: InternalUser = Depends(authenticate)):
            ...
    """

    def __init__(
        self,
        authenticator: ExternalAuthenticator,
        auto_error: bool = True,
        realm: str = "external",
    ):
        """Initialize dependency.

        Args:
            authenticator: Pipeline that authenticates header mappings
            auto_error: Raise 401 on denial instead of returning None
            realm: Realm reported in the ``WWW-Authenticate`` challenge
        """
        self.authenticator = authenticator
        self.auto_error = auto_error
        self.realm = realm

    @classmethod
    def from_settings(
        cls,
        settings: ExternalAuthSettings,
        converter: Optional[PrincipalConverter[Any]] = None,
        listeners: Iterable[AuthenticationEventListener] = (),
        auto_error: bool = True,
    ) -> "ExternalAuthDependency":
        """Create dependency for the configured strategy and challenge realm.

        Args:
            settings: External auth settings
            converter: Principal converter, identity if None
            listeners: Initial event listeners
            auto_error: Raise 401 on denial instead of returning None
        """
        authenticator = build_authenticator(settings.strategy, converter=converter, listeners=listeners)
        return cls(authenticator, auto_error=auto_error, realm=settings.realm)

    def __call__(self, request: Request) -> Optional[Any]:
        """Authenticate the request.

        Raises:
            AuthDependencyError: 401 on denial (when ``auto_error``), or the
                mapped status on an authentication error
        """
        try:
            principal = self.authenticator.authenticate(collect_headers(request))
        except AuthenticationError as e:
            status_code = get_http_status_code(e)
            logger.warning(f"Authentication error on {request.url.path}: {e.message}")
            raise AuthDependencyError(
                "Authentication failed" if status_code < 500 else "Authentication unavailable",
                status_code=status_code,
                headers=self._challenge() if status_code == status.HTTP_401_UNAUTHORIZED else None,
            ) from e

        if principal is None:
            if not self.auto_error:
                return None
            raise AuthDependencyError("Not authenticated", headers=self._challenge())

        user = self.authenticator.to_internal_user(principal)
        request.state.principal = principal
        request.state.username = user.username if user is not None else getattr(principal, "name", None)

        logger.debug(f"Authenticated request to {request.url.path} as [{request.state.username}]")
        return principal

    def _challenge(self) -> Dict[str, str]:
        return {"WWW-Authenticate": f'Bearer realm="{self.realm}"'}
