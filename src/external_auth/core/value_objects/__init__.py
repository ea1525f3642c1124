"""Authentication core value objects."""

from .signing_key import SigningKey
from .token_claims import TokenClaims

__all__ = [
    "SigningKey",
    "TokenClaims",
]
