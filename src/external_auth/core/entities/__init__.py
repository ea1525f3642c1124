"""Authentication core entities."""

from .internal_user import InternalUser

__all__ = [
    "InternalUser",
]
