"""Token claims value object with Keycloak-style claim extraction."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Signature-verified JWT claims.

    Handles ONLY claims access. Every accessor is null-safe: a missing or
    wrongly shaped claim yields ``None`` or an empty list, never an exception.
    Whether an absent claim is fatal is decided by the caller.
    """

    raw_claims: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate token claims structure."""
        if not isinstance(self.raw_claims, dict):
            raise TypeError("Token claims must be a dictionary")

    @property
    def issuer(self) -> Optional[str]:
        """Get issuer (iss) claim."""
        return self.get_string("iss")

    @property
    def subject(self) -> Optional[str]:
        """Get subject (sub) claim."""
        return self.get_string("sub")

    def get_claim(self, claim_name: str, default: Any = None) -> Any:
        """Get specific claim value with default."""
        return self.raw_claims.get(claim_name, default)

    def has_claim(self, claim_name: str) -> bool:
        """Check if claim exists."""
        return claim_name in self.raw_claims

    def get_string(self, claim_name: str) -> Optional[str]:
        """Get a non-empty string claim.

        Args:
            claim_name: Name of the claim

        Returns:
            Claim value, or None if absent, empty or not a string
        """
        value = self.raw_claims.get(claim_name)
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    def get_string_list(self, claim_name: str) -> List[str]:
        """Get a flat list-of-strings claim, empty if absent."""
        return self._string_list(self.raw_claims.get(claim_name), claim_name)

    @property
    def flat_roles(self) -> List[str]:
        """Roles from the top level ``roles`` claim."""
        return self.get_string_list("roles")

    @property
    def realm_roles(self) -> List[str]:
        """Roles nested as ``realm_access.roles``."""
        realm_access = self.raw_claims.get("realm_access")
        if not isinstance(realm_access, dict):
            return []
        return self._string_list(realm_access.get("roles"), "realm_access.roles")

    @property
    def client_roles(self) -> Dict[str, List[str]]:
        """Roles nested per client as ``resource_access.<client>.roles``."""
        resource_access = self.raw_claims.get("resource_access")
        if not isinstance(resource_access, dict):
            return {}

        roles_by_client = {}
        for client_id, client_access in resource_access.items():
            if not isinstance(client_access, dict):
                continue
            roles_by_client[client_id] = self._string_list(
                client_access.get("roles"), f"resource_access.{client_id}.roles"
            )
        return roles_by_client

    @property
    def all_roles(self) -> Set[str]:
        """Union of flat, realm and client roles."""
        roles = set(self.flat_roles)
        roles.update(self.realm_roles)
        for client_roles in self.client_roles.values():
            roles.update(client_roles)
        return roles

    @staticmethod
    def _string_list(value: Any, claim_name: str) -> List[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            logger.debug(f"Ignoring claim [{claim_name}], expected a list but got {type(value).__name__}")
            return []
        return [item for item in value if isinstance(item, str) and item]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return dict(self.raw_claims)

    def __str__(self) -> str:
        """String representation."""
        return f"TokenClaims(claims={len(self.raw_claims)})"

    def __repr__(self) -> str:
        """Debug representation (claim names only)."""
        return f"TokenClaims(claim_names={sorted(self.raw_claims)})"
