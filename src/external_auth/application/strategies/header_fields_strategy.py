"""Trusted proxy header fields verification strategy."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ...core.entities import InternalUser
from ...core.exceptions import AuthenticationDeniedError, MissingCredentialsError

logger = logging.getLogger(__name__)

HeaderValues = Union[str, Sequence[str]]


@dataclass(frozen=True)
class HeaderFieldNames:
    """Names of the headers a reverse proxy injects with the verified identity."""

    username: str = "X-Auth-Username"
    firstname: str = "X-Auth-Given-Name"
    lastname: str = "X-Auth-Family-Name"
    email: str = "X-Auth-Email"
    groups: str = "X-Auth-Groups"
    roles: str = "X-Auth-Roles"

    def __post_init__(self) -> None:
        """Validate header names."""
        for field_name in ("username", "firstname", "lastname", "email", "groups", "roles"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Header name for {field_name} cannot be empty")


def split_on_commas(values: Iterable[str]) -> List[str]:
    """Split comma separated header values, trimming and dropping empty items."""
    return [
        item.strip()
        for value in values
        for item in value.split(",")
        if item.strip()
    ]


class HeaderFieldsVerificationStrategy:
    """Trusts identity headers injected by a reverse proxy.

    Only safe where the proxy strips any client supplied copies of these
    headers before forwarding. Header lookup is case-insensitive.

    Outcome policy:
        - no header collection at all -> ``MissingCredentialsError`` (the
          proxy is misconfigured or was bypassed)
        - missing username, given name or family name ->
          ``AuthenticationDeniedError``
    """

    name = "http_headers"

    def __init__(self, field_names: Optional[HeaderFieldNames] = None):
        self._field_names = field_names or HeaderFieldNames()

    @property
    def field_names(self) -> HeaderFieldNames:
        """Header names read by this strategy."""
        return self._field_names

    def verify(self, credentials: Optional[Mapping[str, HeaderValues]]) -> InternalUser:
        """Build the internal user from request headers.

        Args:
            credentials: Header name to values mapping; a bare string value
                is treated as a single value

        Returns:
            Internal user asserted by the proxy

        Raises:
            MissingCredentialsError: If no header collection was supplied
            AuthenticationDeniedError: If a required header is missing or empty
        """
        logger.info("Authenticating via header fields ...")
        if credentials is None:
            logger.warning("Authentication failed - no header fields provided to authenticator")
            raise MissingCredentialsError(
                "No header fields provided to authenticator",
                details={"strategy": self.name},
            )

        headers = self._normalize(credentials)
        fields = self._field_names

        username = self._required_value(headers, fields.username)
        firstname = self._required_value(headers, fields.firstname)
        lastname = self._required_value(headers, fields.lastname)

        user = InternalUser(
            username=username,
            firstname=firstname,
            lastname=lastname,
            email=self._first_value(headers, fields.email),
            groups=frozenset(split_on_commas(headers.get(fields.groups.lower(), []))),
            roles=frozenset(split_on_commas(headers.get(fields.roles.lower(), []))),
        )

        logger.info(f"Authentication successful for username [{user.username}]")
        return user

    @staticmethod
    def _normalize(credentials: Mapping[str, HeaderValues]) -> Dict[str, List[str]]:
        headers: Dict[str, List[str]] = {}
        for header_name, values in credentials.items():
            if values is None:
                continue
            if isinstance(values, str):
                values = [values]
            headers.setdefault(header_name.lower(), []).extend(
                value for value in values if isinstance(value, str)
            )
        return headers

    @staticmethod
    def _first_value(headers: Dict[str, List[str]], header_name: str) -> Optional[str]:
        values = headers.get(header_name.lower())
        if not values or not values[0].strip():
            return None
        return values[0].strip()

    def _required_value(self, headers: Dict[str, List[str]], header_name: str) -> str:
        value = self._first_value(headers, header_name)
        if value is None:
            logger.info(
                f"Authentication denied - request headers did not contain valid header field [{header_name}]"
            )
            raise AuthenticationDeniedError(
                f"Request headers did not contain valid header field [{header_name}]",
                details={"strategy": self.name, "field": header_name},
            )
        return value

    def __repr__(self) -> str:
        """Debug representation."""
        return f"HeaderFieldsVerificationStrategy(field_names={self._field_names})"
