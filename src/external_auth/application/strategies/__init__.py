"""Credential verification strategies."""

from .jwt_strategy import JwtVerificationStrategy
from .header_fields_strategy import HeaderFieldNames, HeaderFieldsVerificationStrategy, split_on_commas
from .dev_strategy import DevVerificationStrategy
from .chained_strategy import ChainedVerificationStrategy
from .extracting_strategy import CredentialsExtractingStrategy, bearer_token_from_headers

__all__ = [
    "JwtVerificationStrategy",
    "HeaderFieldNames",
    "HeaderFieldsVerificationStrategy",
    "split_on_commas",
    "DevVerificationStrategy",
    "ChainedVerificationStrategy",
    "CredentialsExtractingStrategy",
    "bearer_token_from_headers",
]
