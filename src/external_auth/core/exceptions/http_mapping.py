"""HTTP status code mapping for exceptions.

Used by the transport layer to decide the response for an authentication
failure. Denials are always 401; infrastructure errors depend on whether the
client or the deployment is at fault.
"""

from typing import Dict, Type

from .auth import (
    AuthenticationDeniedError,
    AuthenticationError,
    ConfigurationError,
    InvalidTokenError,
    MissingCredentialsError,
)


# Most specific classes first; the first isinstance match wins.
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    AuthenticationDeniedError: 401,
    InvalidTokenError: 401,
    MissingCredentialsError: 500,
    AuthenticationError: 500,
    ConfigurationError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code, 500 for anything not in the map
    """
    for exception_type, status_code in HTTP_STATUS_MAP.items():
        if isinstance(exception, exception_type):
            return status_code
    return 500
