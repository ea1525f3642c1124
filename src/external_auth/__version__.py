"""Version information for external-auth."""

__version__ = "1.0.0"
