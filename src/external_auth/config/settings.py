"""
Configuration models for external-auth.

The ``method`` field selects the verification strategy: ``jwt``,
``httpHeaders``, ``dev`` or ``chained``.
"""
import logging
from functools import lru_cache
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..application.strategies.jwt_strategy import RSA_ALGORITHMS

logger = logging.getLogger(__name__)


class JwtStrategyConfig(BaseModel):
    """Configuration of the JWT strategy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["jwt"] = "jwt"
    signing_key: str = Field(..., min_length=1, description="Base64 DER or PEM public key of the identity provider")
    algorithms: List[str] = Field(default_factory=lambda: ["RS256"])
    audience: Optional[str] = Field(default=None, description="Expected JWT audience (optional)")
    issuer: Optional[str] = Field(default=None, description="Expected JWT issuer (optional)")
    leeway: int = Field(default=0, ge=0, description="Clock skew tolerance in seconds")

    @field_validator("algorithms")
    @classmethod
    def validate_algorithms(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one algorithm is required")
        unsupported = [algorithm for algorithm in value if algorithm not in RSA_ALGORITHMS]
        if unsupported:
            raise ValueError(f"algorithms {unsupported} cannot be verified with an RSA public key")
        return value


class HttpHeadersStrategyConfig(BaseModel):
    """Configuration of the trusted proxy header strategy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["httpHeaders"] = "httpHeaders"
    username_header: str = Field(default="X-Auth-Username", min_length=1)
    firstname_header: str = Field(default="X-Auth-Given-Name", min_length=1)
    lastname_header: str = Field(default="X-Auth-Family-Name", min_length=1)
    email_header: str = Field(default="X-Auth-Email", min_length=1)
    groups_header: str = Field(default="X-Auth-Groups", min_length=1)
    roles_header: str = Field(default="X-Auth-Roles", min_length=1)


class DevUserConfig(BaseModel):
    """The fixed user returned by the dev strategy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    username: str = Field(..., min_length=1)
    firstname: str = Field(..., min_length=1)
    lastname: str = Field(..., min_length=1)
    email: Optional[str] = None
    groups: List[str] = Field(default_factory=list)
    roles: List[str] = Field(default_factory=list)


class DevStrategyConfig(BaseModel):
    """Configuration of the dev strategy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["dev"] = "dev"
    user: DevUserConfig


class ChainedStrategyConfig(BaseModel):
    """Configuration of a chain of strategies, tried in order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["chained"] = "chained"
    strategies: List["StrategyConfig"] = Field(..., min_length=1)


StrategyConfig = Annotated[
    Union[JwtStrategyConfig, HttpHeadersStrategyConfig, DevStrategyConfig, ChainedStrategyConfig],
    Field(discriminator="method"),
]

ChainedStrategyConfig.model_rebuild()


class ExternalAuthSettings(BaseSettings):
    """
    Settings for external authentication.

    Read from ``EXTERNAL_AUTH_*`` environment variables or a ``.env`` file.
    The strategy is given as JSON, for example::

        EXTERNAL_AUTH_STRATEGY='{"method": "jwt", "signing_key": "MIIBIjANBg..."}'
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTERNAL_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    strategy: StrategyConfig
    realm: str = Field(default="external", description="Realm reported in WWW-Authenticate challenges")


@lru_cache()
def get_settings() -> ExternalAuthSettings:
    """Get cached settings instance."""
    settings = ExternalAuthSettings()
    logger.debug(f"Loaded external auth settings with strategy [{settings.strategy.method}]")
    return settings
