"""Base exceptions for external-auth.

This module defines the base exception hierarchy for the external-auth library.
All exceptions inherit from ExternalAuthError and include error codes and
structured details for logging and listener notifications.
"""

from typing import Any, Dict, Optional


class ExternalAuthError(Exception):
    """Base exception for all external-auth errors.
    
    All exceptions in the external-auth library inherit from this base class
    and include structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
