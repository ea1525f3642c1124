"""JWT verification strategy."""

import logging
from typing import Optional, Sequence

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
    PyJWTError,
)

from ...core.entities import InternalUser
from ...core.exceptions import AuthenticationDeniedError, ConfigurationError, InvalidTokenError
from ...core.value_objects import SigningKey, TokenClaims

logger = logging.getLogger(__name__)

# Claim names issued by Keycloak and other OIDC providers
CLAIM_USERNAME = "preferred_username"
CLAIM_FIRSTNAME = "given_name"
CLAIM_LASTNAME = "family_name"
CLAIM_EMAIL = "email"
CLAIM_GROUPS = "groups"

LOGOUT_PATH = "/protocol/openid-connect/logout"

# The signing key is always an RSA public key
RSA_ALGORITHMS = frozenset({"RS256", "RS384", "RS512", "PS256", "PS384", "PS512"})


class JwtVerificationStrategy:
    """Verifies JWTs signed by an identity provider and extracts the user.

    The signing key is decoded once at construction; an unusable key fails
    immediately rather than on the first request.

    Outcome policy:
        - token that does not parse or verify (signature, expiry, audience,
          issuer) -> ``InvalidTokenError``, since the caller cannot tell a
          tampered token from a misrouted one
        - verified token missing a required identity claim ->
          ``AuthenticationDeniedError``
    """

    name = "jwt"

    def __init__(
        self,
        signing_key: str,
        *,
        algorithms: Sequence[str] = ("RS256",),
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
        leeway: int = 0,
    ):
        """Initialize JWT strategy.

        Args:
            signing_key: Base64 DER (or PEM) public key of the identity provider
            algorithms: Accepted JWT signing algorithms
            audience: Expected ``aud`` claim, not checked if None
            issuer: Expected ``iss`` claim, not checked if None
            leeway: Clock skew tolerance in seconds for ``exp``/``nbf``

        Raises:
            PublicKeyError: If the signing key cannot be decoded
            ConfigurationError: If an algorithm cannot be used with an RSA key
        """
        self._algorithms = self._validate_algorithms(algorithms)
        self._signing_key = SigningKey(signing_key)
        self._public_key = self._signing_key.load()
        self._audience = audience
        self._issuer = issuer
        self._leeway = leeway

        logger.debug(f"JWT strategy configured with {self._signing_key}")

    def verify(self, credentials: Optional[str]) -> InternalUser:
        """Verify a JWT and build the internal user from its claims.

        Args:
            credentials: Encoded JWT (without ``Bearer`` prefix)

        Returns:
            Internal user asserted by the token

        Raises:
            InvalidTokenError: If the token cannot be parsed or verified
            AuthenticationDeniedError: If a required identity claim is missing
        """
        logger.info("Authenticating via JWT ...")
        claims = self._decode(credentials)

        username = self._required_claim(claims, CLAIM_USERNAME)
        firstname = self._required_claim(claims, CLAIM_FIRSTNAME)
        lastname = self._required_claim(claims, CLAIM_LASTNAME)

        issuer = claims.issuer
        user = InternalUser(
            username=username,
            firstname=firstname,
            lastname=lastname,
            email=claims.get_string(CLAIM_EMAIL),
            groups=frozenset(claims.get_string_list(CLAIM_GROUPS)),
            roles=frozenset(claims.all_roles),
            logout_url=issuer + LOGOUT_PATH if issuer else None,
        )

        logger.info(f"Authentication successful for username [{user.username}]")
        return user

    def _decode(self, token: Optional[str]) -> TokenClaims:
        if not token or not isinstance(token, str):
            logger.warning("Authentication failed - no JWT supplied")
            raise InvalidTokenError("JWT is invalid", details={"strategy": self.name, "reason": "missing_token"})

        options = {
            "verify_signature": True,
            "verify_exp": True,
            "verify_nbf": True,
            "verify_aud": self._audience is not None,
            "verify_iss": self._issuer is not None,
        }

        try:
            payload = jwt.decode(
                token,
                key=self._public_key,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                leeway=self._leeway,
                options=options,
            )
        except ExpiredSignatureError as e:
            raise self._invalid_token("expired", e) from e
        except InvalidSignatureError as e:
            raise self._invalid_token("invalid_signature", e) from e
        except (InvalidAudienceError, InvalidIssuerError) as e:
            raise self._invalid_token("invalid_audience_or_issuer", e) from e
        except DecodeError as e:
            raise self._invalid_token("malformed", e) from e
        except JWTInvalidTokenError as e:
            raise self._invalid_token("invalid", e) from e
        except PyJWTError as e:
            raise self._invalid_token("unusable_key", e) from e

        return TokenClaims(raw_claims=payload)

    def _validate_algorithms(self, algorithms: Sequence[str]) -> list:
        if isinstance(algorithms, str):
            algorithms = [algorithms]
        algorithms = list(algorithms)
        if not algorithms:
            raise ConfigurationError(
                "At least one JWT algorithm is required",
                details={"strategy": self.name},
            )
        unsupported = [algorithm for algorithm in algorithms if algorithm not in RSA_ALGORITHMS]
        if unsupported:
            raise ConfigurationError(
                f"JWT algorithms {unsupported} cannot be verified with an RSA public key",
                details={"strategy": self.name, "algorithms": unsupported},
            )
        return algorithms

    def _invalid_token(self, reason: str, cause: Exception) -> InvalidTokenError:
        logger.warning(f"Authentication failed - JWT is invalid [{reason}]: {cause}")
        return InvalidTokenError(
            "JWT is invalid",
            details={"strategy": self.name, "reason": reason},
        )

    def _required_claim(self, claims: TokenClaims, claim_name: str) -> str:
        value = claims.get_string(claim_name)
        if value is None:
            logger.info(f"Authentication denied - JWT did not contain valid claim field [{claim_name}]")
            raise AuthenticationDeniedError(
                f"JWT did not contain valid claim field [{claim_name}]",
                details={"strategy": self.name, "field": claim_name},
            )
        return value

    def __repr__(self) -> str:
        """Debug representation."""
        return f"JwtVerificationStrategy(signing_key={self._signing_key}, algorithms={self._algorithms})"
