"""Internal user entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class InternalUser:
    """Normalized identity produced by every verification strategy.

    Handles ONLY identity representation and field validation.
    Does not perform verification - that's handled by strategies.
    """

    # Required identity fields
    username: str
    firstname: str
    lastname: str

    # Optional identity fields
    email: Optional[str] = None

    # Authorization info
    groups: FrozenSet[str] = field(default_factory=frozenset)
    roles: FrozenSet[str] = field(default_factory=frozenset)

    # Only token based strategies can derive an end-session endpoint
    logout_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate required fields and freeze collections."""
        for field_name in ("username", "firstname", "lastname"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"{field_name} must be a string")
            if not value.strip():
                raise ValueError(f"{field_name} cannot be empty")

        # Set frozen collections using object.__setattr__ since dataclass is frozen
        object.__setattr__(self, "groups", self._freeze(self.groups, "groups"))
        object.__setattr__(self, "roles", self._freeze(self.roles, "roles"))

    @staticmethod
    def _freeze(values: Optional[Iterable[str]], field_name: str) -> FrozenSet[str]:
        if values is None:
            return frozenset()
        if isinstance(values, str):
            raise TypeError(f"{field_name} must be a collection of strings, not a string")
        return frozenset(values)

    @property
    def display_name(self) -> str:
        """Get user's display name."""
        return f"{self.firstname} {self.lastname}"

    @property
    def name(self) -> str:
        """Principal name, so the user can serve as its own principal."""
        return self.display_name

    def has_role(self, role: str) -> bool:
        """Check if user has specific role."""
        return role in self.roles

    def in_group(self, group: str) -> bool:
        """Check if user is a member of specific group."""
        return group in self.groups

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary."""
        return {
            "username": self.username,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "display_name": self.display_name,
            "email": self.email,
            "groups": sorted(self.groups),
            "roles": sorted(self.roles),
            "logout_url": self.logout_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InternalUser":
        """Create user from dictionary.

        Derived keys such as ``display_name`` are ignored.
        """
        return cls(
            username=data["username"],
            firstname=data["firstname"],
            lastname=data["lastname"],
            email=data.get("email"),
            groups=data.get("groups"),
            roles=data.get("roles"),
            logout_url=data.get("logout_url"),
        )

    def __str__(self) -> str:
        """String representation."""
        return f"InternalUser({self.username})"
