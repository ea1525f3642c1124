"""Strategy factory for external authentication."""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ...application import (
    ChainedVerificationStrategy,
    CredentialsExtractingStrategy,
    DevVerificationStrategy,
    ExternalAuthenticator,
    HeaderFieldNames,
    HeaderFieldsVerificationStrategy,
    JwtVerificationStrategy,
    bearer_token_from_headers,
)
from ...config.settings import (
    ChainedStrategyConfig,
    DevStrategyConfig,
    DevUserConfig,
    ExternalAuthSettings,
    HttpHeadersStrategyConfig,
    JwtStrategyConfig,
    StrategyConfig,
)
from ...core.entities import InternalUser
from ...core.exceptions import ConfigurationError
from ...core.protocols import (
    AuthenticationEventListener,
    PrincipalConverter,
    VerificationStrategy,
)

logger = logging.getLogger(__name__)

HeaderMapping = Mapping[str, Union[str, Sequence[str]]]


class StrategyFactory:
    """Builds verification strategies from configuration models.

    Handles ONLY strategy instantiation. Two flavours are offered:

        - ``create``: each strategy takes its native credentials (a token
          string for JWT, a header mapping for header fields)
        - ``create_for_requests``: every strategy takes the request header
          mapping, so strategies of different kinds can share one chain
    """

    def create(self, config: StrategyConfig) -> VerificationStrategy:
        """Create a strategy over native credentials.

        Raises:
            ConfigurationError: If the configuration cannot produce a strategy
        """
        if isinstance(config, JwtStrategyConfig):
            return self.create_jwt_strategy(config)
        if isinstance(config, HttpHeadersStrategyConfig):
            return self.create_header_fields_strategy(config)
        if isinstance(config, DevStrategyConfig):
            return self.create_dev_strategy(config)
        if isinstance(config, ChainedStrategyConfig):
            return ChainedVerificationStrategy([self.create(child) for child in config.strategies])
        raise ConfigurationError(
            f"Unsupported strategy configuration: {type(config).__name__}",
            details={"config_type": type(config).__name__},
        )

    def create_for_requests(self, config: StrategyConfig) -> VerificationStrategy:
        """Create a strategy over an HTTP header mapping.

        JWT strategies read their token from the ``Authorization: Bearer``
        header. Dev strategies ignore the headers.
        """
        if isinstance(config, JwtStrategyConfig):
            return CredentialsExtractingStrategy(
                self.create_jwt_strategy(config),
                bearer_token_from_headers,
            )
        if isinstance(config, ChainedStrategyConfig):
            return ChainedVerificationStrategy(
                [self.create_for_requests(child) for child in config.strategies]
            )
        return self.create(config)

    def create_jwt_strategy(self, config: JwtStrategyConfig) -> JwtVerificationStrategy:
        """Create JWT strategy; the signing key is decoded here."""
        logger.debug("Creating JWT verification strategy")
        return JwtVerificationStrategy(
            config.signing_key,
            algorithms=config.algorithms,
            audience=config.audience,
            issuer=config.issuer,
            leeway=config.leeway,
        )

    def create_header_fields_strategy(
        self,
        config: HttpHeadersStrategyConfig,
    ) -> HeaderFieldsVerificationStrategy:
        """Create header fields strategy."""
        logger.debug("Creating header fields verification strategy")
        field_names = HeaderFieldNames(
            username=config.username_header,
            firstname=config.firstname_header,
            lastname=config.lastname_header,
            email=config.email_header,
            groups=config.groups_header,
            roles=config.roles_header,
        )
        return HeaderFieldsVerificationStrategy(field_names)

    def create_dev_strategy(self, config: DevStrategyConfig) -> DevVerificationStrategy:
        """Create dev strategy for the configured user."""
        logger.warning("Creating dev verification strategy; every request will be authenticated")
        return DevVerificationStrategy(self.to_internal_user(config.user))

    @staticmethod
    def to_internal_user(config: DevUserConfig) -> InternalUser:
        """Build the fixed dev user."""
        try:
            return InternalUser(
                username=config.username,
                firstname=config.firstname,
                lastname=config.lastname,
                email=config.email,
                groups=frozenset(config.groups),
                roles=frozenset(config.roles),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid dev user: {e}",
                details={"strategy": "dev"},
            ) from e


_default_factory = StrategyFactory()


def build_strategy(config: StrategyConfig) -> VerificationStrategy:
    """Build a strategy over native credentials from its configuration."""
    return _default_factory.create(config)


def build_request_strategy(config: StrategyConfig) -> VerificationStrategy:
    """Build a strategy over HTTP request headers from its configuration."""
    return _default_factory.create_for_requests(config)


def build_authenticator(
    config: Union[StrategyConfig, ExternalAuthSettings],
    converter: Optional[PrincipalConverter[Any]] = None,
    listeners: Iterable[AuthenticationEventListener] = (),
    *,
    for_requests: bool = True,
) -> ExternalAuthenticator:
    """Build a ready authentication pipeline.

    Args:
        config: Strategy configuration, or settings holding one
        converter: Principal converter, identity if None
        listeners: Initial event listeners
        for_requests: Authenticate header mappings (default) instead of
            native credentials

    Returns:
        Configured ExternalAuthenticator

    Raises:
        ConfigurationError: If the strategy cannot be built
    """
    if isinstance(config, ExternalAuthSettings):
        config = config.strategy

    strategy = build_request_strategy(config) if for_requests else build_strategy(config)
    logger.info(f"External authentication configured with strategy [{config.method}]")
    return ExternalAuthenticator(strategy, converter=converter, listeners=listeners)
